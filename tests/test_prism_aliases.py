"""
Unit tests for prism_aliases.py

Tests alias resolution, catalog loading and component URL generation.
"""
import os
import sys
import unittest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import prism_aliases
from prism_aliases import PrismAliasResolver, LanguageEntry
from prism_components import LANGUAGES


SAMPLE_LANGUAGES = {
    "meta": {"path": "components/prism-{id}", "noCSS": True},
    "javascript": {"title": "JavaScript", "require": "clike", "alias": ["js", "node"]},
    "python": {"title": "Python", "alias": "py"},
    "rust": {"title": "Rust"},
}


class TestLoadCatalog(unittest.TestCase):
    """Test catalog normalization."""

    def test_meta_dropped(self):
        catalog = prism_aliases.load_catalog(SAMPLE_LANGUAGES)
        self.assertNotIn("meta", catalog)
        self.assertEqual(set(catalog), {"javascript", "python", "rust"})

    def test_alias_shapes_normalized(self):
        """String, list and missing aliases all become tuples."""
        catalog = prism_aliases.load_catalog(SAMPLE_LANGUAGES)
        self.assertEqual(catalog["javascript"].aliases, ("js", "node"))
        self.assertEqual(catalog["python"].aliases, ("py",))
        self.assertEqual(catalog["rust"].aliases, ())

    def test_title_kept(self):
        catalog = prism_aliases.load_catalog(SAMPLE_LANGUAGES)
        self.assertEqual(catalog["python"].title, "Python")
        self.assertIsInstance(catalog["python"], LanguageEntry)


class TestResolveLanguage(unittest.TestCase):
    """Test resolution against a small catalog."""

    def setUp(self):
        self.resolver = PrismAliasResolver.from_languages(SAMPLE_LANGUAGES)

    def test_example_lookups(self):
        self.assertEqual(self.resolver.resolve_language("JS"), "javascript")
        self.assertEqual(self.resolver.resolve_language("Py"), "python")
        self.assertIsNone(self.resolver.resolve_language("ruby"))

    def test_canonical_resolves_to_itself(self):
        for lang_id in ("javascript", "python", "rust"):
            self.assertEqual(self.resolver.resolve_language(lang_id), lang_id)

    def test_many_to_one(self):
        self.assertEqual(self.resolver.resolve_language("js"), "javascript")
        self.assertEqual(self.resolver.resolve_language("node"), "javascript")
        self.assertEqual(
            sorted(self.resolver.list_canonical_languages()),
            ["javascript", "python", "rust"]
        )

    def test_unresolved_inputs(self):
        """Empty, free-text and malformed tags are not found, never errors."""
        for tag in ("", "not-a-real-language-xyz", "text", "output", " js", "js ",
                    "java script", "!!", "\n", "py\x00"):
            self.assertIsNone(self.resolver.resolve_language(tag), repr(tag))

    def test_meta_not_resolvable(self):
        self.assertIsNone(self.resolver.resolve_language("meta"))
        self.assertNotIn("meta", self.resolver.list_canonical_languages())

    def test_no_prefix_matching(self):
        self.assertIsNone(self.resolver.resolve_language("java"))
        self.assertIsNone(self.resolver.resolve_language("pyt"))

    def test_idempotent(self):
        first = [self.resolver.resolve_language(t) for t in ("JS", "py", "nope")]
        second = [self.resolver.resolve_language(t) for t in ("JS", "py", "nope")]
        self.assertEqual(first, second)

    def test_duplicate_alias_last_wins(self):
        languages = {
            "first": {"title": "First", "alias": "dup"},
            "second": {"title": "Second", "alias": ["dup"]},
        }
        resolver = PrismAliasResolver.from_languages(languages)
        self.assertEqual(resolver.resolve_language("dup"), "second")

    def test_alias_case_folded(self):
        resolver = PrismAliasResolver.from_languages({"csharp": {"title": "C#", "alias": ["CS"]}})
        self.assertEqual(resolver.resolve_language("cs"), "csharp")
        self.assertEqual(resolver.resolve_language("Cs"), "csharp")

    def test_contains(self):
        self.assertIn("JS", self.resolver)
        self.assertNotIn("ruby", self.resolver)
        self.assertNotIn(None, self.resolver)

    def test_table_is_read_only(self):
        with self.assertRaises(TypeError):
            self.resolver._alias_map["ruby"] = "ruby"
        with self.assertRaises(AttributeError):
            self.resolver.list_canonical_languages().add("ruby")


class TestBundledCatalog(unittest.TestCase):
    """Properties that must hold for every entry of the bundled catalog."""

    def setUp(self):
        self.resolver = prism_aliases.default_resolver()
        self.catalog = prism_aliases.load_catalog(LANGUAGES)

    def test_every_canonical_id_resolves_to_itself(self):
        for lang_id in self.catalog:
            self.assertEqual(self.resolver.resolve_language(lang_id), lang_id)

    def test_every_alias_resolves_case_insensitively(self):
        for lang_id, entry in self.catalog.items():
            for alias in entry.aliases:
                self.assertEqual(self.resolver.resolve_language(alias), lang_id, alias)
                self.assertEqual(self.resolver.resolve_language(alias.upper()), lang_id, alias)

    def test_meta_excluded(self):
        self.assertIn("meta", LANGUAGES)
        self.assertNotIn("meta", self.resolver.list_canonical_languages())
        self.assertIsNone(self.resolver.resolve_language("META"))

    def test_code_file_extensions_resolve(self):
        """The default code extensions all map to a Prism component."""
        expected = {
            "js": "javascript", "ts": "typescript", "cpp": "cpp", "py": "python",
            "java": "java", "go": "go", "c": "c", "sh": "bash", "rs": None,
        }
        for ext, lang_id in expected.items():
            self.assertEqual(self.resolver.resolve_language(ext), lang_id, ext)

    def test_common_aliases(self):
        self.assertEqual(self.resolver.resolve_language("html"), "markup")
        self.assertEqual(self.resolver.resolve_language("yml"), "yaml")
        self.assertEqual(self.resolver.resolve_language("Dockerfile"), "docker")
        self.assertEqual(self.resolver.resolve_language("shell"), "bash")

    def test_default_resolver_cached(self):
        self.assertIs(prism_aliases.default_resolver(), prism_aliases.default_resolver())


class TestFindFenceLanguages(unittest.TestCase):
    """Test fence tag harvesting."""

    def test_finds_tags_in_order(self):
        text = "```python\nx = 1\n```\n\ntext\n\n```js\nlet y;\n```\n"
        self.assertEqual(prism_aliases.find_fence_languages(text), ["python", "js"])

    def test_tag_characters(self):
        text = "```shell-session\n$ ls\n```\n```objective_c\n```\n```c++\n```"
        # c++ stops at the first non-identifier character
        self.assertEqual(
            prism_aliases.find_fence_languages(text),
            ["shell-session", "objective_c", "c"]
        )

    def test_requires_tag_right_after_backticks(self):
        self.assertEqual(prism_aliases.find_fence_languages("``` python\n```"), [])
        self.assertEqual(prism_aliases.find_fence_languages("```\nplain\n```"), [])

    def test_longer_fences(self):
        self.assertEqual(prism_aliases.find_fence_languages("````rs\nfn main() {}\n````"), ["rs"])

    def test_empty(self):
        self.assertEqual(prism_aliases.find_fence_languages(""), [])
        self.assertEqual(prism_aliases.find_fence_languages(None), [])


class TestCollectLanguages(unittest.TestCase):
    """Test batch resolution."""

    def test_distinct_sorted_canonical(self):
        docs = [
            "```js\n```\n```JavaScript\n```",
            "```py\n```\n```text\n```",
            "```node\n```",
        ]
        resolver = PrismAliasResolver.from_languages(SAMPLE_LANGUAGES)
        self.assertEqual(prism_aliases.collect_languages(docs, resolver), ["javascript", "python"])

    def test_unresolved_skipped(self):
        self.assertEqual(prism_aliases.collect_languages(["```output\n```", "```xyz\n```"]), [])

    def test_default_resolver_used(self):
        self.assertEqual(prism_aliases.collect_languages(["```sh\necho\n```"]), ["bash"])


class TestExpandRequirements(unittest.TestCase):
    """Test component dependency ordering."""

    def test_dependency_before_dependent(self):
        self.assertEqual(prism_aliases.expand_requirements(["cpp"]), ["c", "cpp"])
        self.assertEqual(prism_aliases.expand_requirements(["arduino"]), ["c", "cpp", "arduino"])

    def test_core_languages_skipped(self):
        self.assertEqual(prism_aliases.expand_requirements(["php"]), ["markup-templating", "php"])
        self.assertEqual(prism_aliases.expand_requirements(["javascript", "python"]), ["python"])

    def test_shared_dependency_once(self):
        self.assertEqual(
            prism_aliases.expand_requirements(["cpp", "objectivec"]),
            ["c", "cpp", "objectivec"]
        )

    def test_cycle_terminates(self):
        languages = {"a": {"require": "b"}, "b": {"require": ["a"]}}
        self.assertEqual(prism_aliases.expand_requirements(["a"], languages, bundled=()), ["b", "a"])


class TestComponentUrls(unittest.TestCase):
    """Test component URL construction."""

    def test_default_cdn(self):
        urls = prism_aliases.component_urls(["python"])
        self.assertEqual(
            urls,
            ["https://cdnjs.cloudflare.com/ajax/libs/prism/1.29.0/components/prism-python.min.js"]
        )

    def test_each_id_once(self):
        urls = prism_aliases.component_urls(["rust", "go", "rust"], base="/assets/")
        self.assertEqual(urls, ["/assets/prism-rust.min.js", "/assets/prism-go.min.js"])

    def test_custom_prefix_and_ext(self):
        urls = prism_aliases.component_urls(["c"], base="vendor", prefix="lang", ext="js")
        self.assertEqual(urls, ["vendor/lang-c.js"])


if __name__ == "__main__":
    unittest.main()
