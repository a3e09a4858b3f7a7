from callflow.core.call import Call
from callflow.core.status import CLIENT_ERROR_NOT_FOUND, Status
from callflow.filter.status_page import NO_DESCRIPTION, render_status_page


def test_page_structure():
    page = render_status_page(CLIENT_ERROR_NOT_FOUND, Call())
    text = page.get_text()

    assert page.media_type == "text/html"
    assert text.startswith("<html>\n")
    assert "<title>Status page</title>" in text
    assert f"<h3>{CLIENT_ERROR_NOT_FOUND.description}</h3>" in text
    assert f'<a href="{CLIENT_ERROR_NOT_FOUND.reference_uri}">here</a>' in text
    assert text.endswith("</html>\n")


def test_missing_description_uses_fallback():
    text = render_status_page(Status(code=404), Call()).get_text()
    assert f"<h3>{NO_DESCRIPTION}</h3>" in text


def test_optional_links_absent_by_default():
    text = render_status_page(CLIENT_ERROR_NOT_FOUND, Call()).get_text()
    assert "mailto:" not in text
    assert "home page" not in text


def test_optional_links_present_when_configured():
    text = render_status_page(
        CLIENT_ERROR_NOT_FOUND, Call(), email="admin@x.com", home_uri="/home"
    ).get_text()
    assert 'contact the <a href="mailto:admin@x.com">administrator</a>' in text
    assert 'continue your visit at our <a href="/home">home page</a>' in text


def test_values_are_escaped():
    status = Status(code=400, description="<script>alert(1)</script>")
    text = render_status_page(status, Call(), home_uri='/home?a=1&b="2"').get_text()
    assert "<script>" not in text
    assert "&lt;script&gt;" in text
    assert 'href="/home?a=1&amp;b=&#34;2&#34;"' in text
