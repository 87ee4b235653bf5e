"""Tests for string sanitizing and page rendering."""

from astro_migration.models import SeoInfo
from astro_migration.rendering import (
    clean_string,
    derive_route,
    output_filename,
    render_page,
)

SEO = SeoInfo(
    title="Button 按钮",
    description='Say "hi"',
    keywords="button",
    image="/assets/logo.png",
    site_name="Docs",
)


class TestCleanString:
    def test_collapses_whitespace_and_escapes_quotes(self):
        value = "a\n\tb  \"c\" 'd'\r"
        assert clean_string(value) == 'a b \\"c\\" \\\'d\\\''

    def test_result_is_single_line(self):
        result = clean_string("line one\r\nline two\n\n\tline three")
        assert result == "line one line two line three"

    def test_trims(self):
        assert clean_string("   padded   ") == "padded"

    def test_empty_and_none(self):
        assert clean_string("") == ""
        assert clean_string(None) == ""


class TestRoutes:
    def test_index_maps_to_root(self):
        assert derive_route("index.html") == "/"

    def test_other_pages_map_to_base_name(self):
        assert derive_route("up-form.html") == "/up-form"
        assert derive_route("button.html") == "/button"

    def test_output_filename(self):
        assert output_filename("up-form.html") == "up-form.astro"


class TestRenderPage:
    def test_frontmatter(self):
        page = render_page("button.html", SEO, "<p>hi</p>")
        assert page.startswith("---\n")
        assert 'const title = "Button 按钮";' in page
        assert 'const description = "Say \\"hi\\"";' in page
        assert 'const keywords = "button";' in page
        assert 'const image = "/assets/logo.png";' in page
        assert 'const site_name = "Docs";' in page
        assert 'const route = "/button";' in page
        assert "import Layout from '../layouts/Layout.astro';" in page

    def test_body_wraps_content_in_layout(self):
        page = render_page("button.html", SEO, "<p>hi</p>")
        assert "  site_name={site_name}\n  route={route}\n>\n" in page
        assert page.endswith("  <p>hi</p>\n</Layout>")

    def test_index_route(self):
        page = render_page("index.html", SEO, "")
        assert 'const route = "/";' in page

    def test_custom_layout_import(self):
        page = render_page(
            "a.html", SEO, "", layout_import="../../shared/DocsLayout.astro"
        )
        assert "import Layout from '../../shared/DocsLayout.astro';" in page
