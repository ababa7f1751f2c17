"""
Security edge case tests.

These tests probe the places where project content reaches the filesystem
or the generated page:
- os.path.join absolute path bypass
- Symlinks pointing out of the project folder
- Null byte injection
- HTML injection through titles, file names and math
- Catalog lookups with object-like or lookalike keys
- ReDoS (regex denial of service)
"""
import os
import sys
import time
import tempfile

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from prism_aliases import default_resolver
from print_converter import (
    Document,
    PrintConfig,
    build_document,
    clean_print_folder,
    inline_images,
    render_markdown,
    safe_read_bytes,
    sanitize_filename_for_format,
    slugify,
    validate_folder_path,
)

needs_symlinks = pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")


def write_bytes(path, data=b"data"):
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "wb") as f:
        f.write(data)


class TestOsPathJoinBypass:
    """os.path.join drops the base when the second part is absolute."""

    def test_absolute_path_in_relative(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            with pytest.raises(ValueError) as exc:
                safe_read_bytes(tmpdir, "/etc/passwd")
            assert "Security violation" in str(exc.value)

    def test_absolute_path_with_dots(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            with pytest.raises(ValueError):
                safe_read_bytes(tmpdir, "/../../../etc/passwd")

    def test_prefix_sibling_not_inside(self):
        """/tmp/abc-evil is not inside /tmp/abc."""
        with tempfile.TemporaryDirectory() as tmpdir:
            base = os.path.join(tmpdir, "abc")
            sibling = os.path.join(tmpdir, "abc-evil", "x.png")
            write_bytes(sibling)
            os.makedirs(base)
            with pytest.raises(ValueError):
                safe_read_bytes(base, "../abc-evil/x.png")


@needs_symlinks
class TestSymlinkEscape:
    """Symlinks are resolved before the containment check."""

    def test_symlink_to_outside_blocked(self):
        with tempfile.TemporaryDirectory() as outside, tempfile.TemporaryDirectory() as project:
            secret = os.path.join(outside, "secret.png")
            write_bytes(secret, b"secret")
            os.symlink(secret, os.path.join(project, "logo.png"))

            with pytest.raises(ValueError):
                safe_read_bytes(project, "logo.png")

    def test_symlink_inside_allowed(self):
        with tempfile.TemporaryDirectory() as project:
            real = os.path.join(project, "img", "real.png")
            write_bytes(real, b"ok")
            os.symlink(real, os.path.join(project, "alias.png"))
            assert safe_read_bytes(project, "alias.png") == b"ok"

    def test_symlinked_image_not_inlined(self):
        with tempfile.TemporaryDirectory() as outside, tempfile.TemporaryDirectory() as project:
            secret = os.path.join(outside, "secret.png")
            write_bytes(secret, b"secret")
            os.symlink(secret, os.path.join(project, "logo.png"))

            html, warnings = inline_images('<img src="logo.png">', project)
            assert 'src="logo.png"' in html
            assert len(warnings) == 1

    def test_clean_through_symlink_refused(self):
        with tempfile.TemporaryDirectory() as outside, tempfile.TemporaryDirectory() as project:
            keep = os.path.join(outside, "keep.txt")
            write_bytes(keep)
            os.symlink(outside, os.path.join(project, "print"))

            with pytest.raises(ValueError):
                clean_print_folder(project, "print")
            assert os.path.exists(keep)


class TestNullByteInjection:
    """Null bytes never reach open() silently."""

    def test_null_byte_in_relative_path(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            with pytest.raises(ValueError):
                safe_read_bytes(tmpdir, "a.png\x00.txt")


class TestCleanPrintFolderTargets:
    """Only a subfolder of the project can be removed."""

    def test_absolute_output_dir_refused(self):
        with tempfile.TemporaryDirectory() as outside, tempfile.TemporaryDirectory() as project:
            with pytest.raises(ValueError):
                clean_print_folder(project, outside)
            assert os.path.isdir(outside)

    def test_nested_traversal_refused(self):
        with tempfile.TemporaryDirectory() as project:
            with pytest.raises(ValueError):
                clean_print_folder(project, "print/../..")


class TestValidateFolderPathEdgeCases:
    """Edge cases for the folder validator."""

    def test_traversal_collapsing_into_system_dir(self):
        is_valid, msg = validate_folder_path("/etc/../etc/ssh")
        assert not is_valid
        assert "/etc" in msg

    def test_system_dir_prefix_lookalike_allowed(self):
        is_valid, _ = validate_folder_path("/procfs/project")
        assert is_valid

    def test_whitespace_only(self):
        is_valid, msg = validate_folder_path("   ")
        assert not is_valid
        assert "empty" in msg


class TestHTMLInjection:
    """Project-controlled strings are escaped in the generated page."""

    def test_title_escaped(self):
        html, _ = build_document([], PrintConfig(title="</title><script>alert(1)</script>"))
        assert "<script>alert(1)</script>" not in html
        assert "&lt;/title&gt;&lt;script&gt;" in html

    def test_file_name_escaped_in_section(self):
        doc = Document("/p/x.md", '"><script>alert(1)</script>.md', "# x")
        doc.html = "<h1>x</h1>"
        html, _ = build_document([doc], PrintConfig())
        assert '"><script>alert(1)' not in html
        assert "&quot;&gt;&lt;script&gt;" in html

    def test_script_inside_math_escaped(self):
        html = render_markdown("Formula $a</script>b$ here")
        assert "</script>" not in html
        assert "$a&lt;/script&gt;b$" in html


class TestCatalogLookupKeys:
    """Lookups only hit real catalog entries."""

    def test_object_like_keys(self):
        resolver = default_resolver()
        for tag in ("__proto__", "constructor", "toString", "hasOwnProperty", "__class__", "__dict__"):
            assert resolver.resolve_language(tag) is None, tag

    def test_fullwidth_lookalike(self):
        resolver = default_resolver()
        assert resolver.resolve_language("ＪＳ") is None
        assert resolver.resolve_language("JS") == "javascript"

    def test_very_long_tag(self):
        assert default_resolver().resolve_language("a" * 100000) is None


class TestReDoS:
    """Regexes applied to project content stay fast on pathological input."""

    def test_inline_math_many_dollars(self):
        start = time.time()
        render_markdown("$a " * 20000)
        elapsed = time.time() - start
        assert elapsed < 5.0, f"Math protection took {elapsed}s - possible ReDoS"

    def test_slugify_long_input(self):
        start = time.time()
        slug = slugify("a-" * 100000 + "!" * 100000)
        elapsed = time.time() - start
        assert elapsed < 2.0
        assert not slug.endswith("-")

    def test_filename_sanitization_long_input(self):
        start = time.time()
        result = sanitize_filename_for_format("a" * 100000 + " " * 100000 + "b" * 100000, ".html")
        elapsed = time.time() - start
        assert elapsed < 2.0, f"Filename sanitization took {elapsed}s - possible ReDoS"
        assert result.endswith(".html")
        assert len(result.encode("utf-8")) <= 255
