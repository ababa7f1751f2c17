"""
Prism language alias resolution

Maps the language tags found on fenced code blocks (```js, ```Python,
```sh ...) to the canonical Prism component ids, so only the component
scripts a document actually needs get attached to it.

- Lookups are case-insensitive and otherwise exact
- Unknown, empty or free-text tags (text, output, typos) resolve to None
- The catalog "meta" record is never resolvable
"""
import re
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from prism_components import LANGUAGES, PRISM_VERSION

META_ENTRY = "meta"
PRISM_CDN = f"https://cdnjs.cloudflare.com/ajax/libs/prism/{PRISM_VERSION}"
COMPONENTS_BASE = f"{PRISM_CDN}/components"
# Languages built into prism.min.js
CORE_LANGUAGES = frozenset(["markup", "css", "clike", "javascript"])

# Three backticks followed immediately by the tag
FENCE_TAG_RE = re.compile(r"```([A-Za-z0-9_-]+)")


class LanguageEntry:
    """A single highlightable language from the Prism catalog."""
    def __init__(self, lang_id: str, title: str, aliases: Tuple[str, ...] = ()):
        self.id = lang_id
        self.title = title
        self.aliases = aliases

    def __repr__(self):
        return f"LanguageEntry(id={self.id}, title={self.title}, aliases={self.aliases})"


def _normalize_aliases(raw) -> Tuple[str, ...]:
    """Catalog aliases come as a string, a list of strings, or nothing."""
    if not raw:
        return ()
    if isinstance(raw, str):
        return (raw,)
    return tuple(raw)


def load_catalog(languages: Mapping[str, Mapping]) -> Dict[str, LanguageEntry]:
    """
    Normalize raw catalog records into LanguageEntry objects.

    The meta record is dropped; ``require`` only matters for loading
    components (see expand_requirements).
    """
    catalog = {}
    for lang_id, raw in languages.items():
        if lang_id == META_ENTRY:
            continue
        catalog[lang_id] = LanguageEntry(
            lang_id,
            raw.get("title", lang_id),
            _normalize_aliases(raw.get("alias")),
        )
    return catalog


class PrismAliasResolver:
    """Case-insensitive lookup from any known spelling to a canonical id."""

    def __init__(self, catalog: Mapping[str, LanguageEntry]):
        alias_map: Dict[str, str] = {}
        canonical = set()
        for lang_id, entry in catalog.items():
            if lang_id == META_ENTRY:
                continue
            canonical.add(lang_id)
            alias_map[lang_id.lower()] = lang_id
            # Duplicate aliases: last registration wins
            for alias in entry.aliases:
                alias_map[alias.lower()] = lang_id
        self._alias_map = MappingProxyType(alias_map)
        self._languages = frozenset(canonical)

    @classmethod
    def from_languages(cls, languages: Mapping[str, Mapping]) -> "PrismAliasResolver":
        """Build a resolver straight from raw catalog records."""
        return cls(load_catalog(languages))

    def resolve_language(self, tag: str) -> Optional[str]:
        """Return the canonical id for ``tag``, or None if it is not a known language."""
        if not tag:
            return None
        return self._alias_map.get(tag.lower())

    def list_canonical_languages(self) -> frozenset:
        return self._languages

    def __contains__(self, tag) -> bool:
        return isinstance(tag, str) and self.resolve_language(tag) is not None

    def __len__(self):
        return len(self._languages)


@lru_cache(maxsize=None)
def default_resolver() -> PrismAliasResolver:
    """Resolver over the bundled Prism catalog, built once per process."""
    return PrismAliasResolver.from_languages(LANGUAGES)


def find_fence_languages(markdown_text: str) -> List[str]:
    """Language tags of fenced code blocks, in document order."""
    if not markdown_text:
        return []
    return FENCE_TAG_RE.findall(markdown_text)


def collect_languages(markdown_texts: Iterable[str],
                      resolver: Optional[PrismAliasResolver] = None) -> List[str]:
    """
    Distinct canonical ids used across a batch of Markdown documents.

    Unresolved tags are skipped; their code blocks render unhighlighted.
    """
    resolver = resolver or default_resolver()
    found = set()
    for text in markdown_texts:
        for tag in find_fence_languages(text):
            lang_id = resolver.resolve_language(tag)
            if lang_id:
                found.add(lang_id)
    return sorted(found)


def expand_requirements(language_ids: Iterable[str],
                        languages: Optional[Mapping[str, Mapping]] = None,
                        bundled: Iterable[str] = CORE_LANGUAGES) -> List[str]:
    """
    Add the components each id ``require``s, dependencies ahead of dependents.

    Ids already shipped in ``prism.min.js`` are left out.
    """
    languages = LANGUAGES if languages is None else languages
    bundled = frozenset(bundled)
    ordered = []
    seen = set()

    def visit(lang_id):
        if lang_id in seen or lang_id in bundled:
            return
        seen.add(lang_id)
        for dep in _normalize_aliases(languages.get(lang_id, {}).get("require")):
            visit(dep)
        ordered.append(lang_id)

    for lang_id in language_ids:
        visit(lang_id)
    return ordered


def component_urls(language_ids: Iterable[str], base: str = COMPONENTS_BASE,
                   prefix: str = "prism", ext: str = "min.js") -> List[str]:
    """One ``<base>/<prefix>-<id>.<ext>`` reference per id, without repeats."""
    base = base.rstrip("/")
    urls = []
    seen = set()
    for lang_id in language_ids:
        if lang_id in seen:
            continue
        seen.add(lang_id)
        urls.append(f"{base}/{prefix}-{lang_id}.{ext}")
    return urls
