"""
Folder to print-ready HTML conversion utilities

Turns a folder of source code and Markdown into one HTML document:
- Code files are wrapped in fenced Markdown blocks tagged with their extension
- Existing Markdown is copied through with relative links/images rewritten
- Every document is rendered with Python-Markdown, math protected from the parser
- Documents are concatenated with page breaks; Prism and KaTeX assets are attached

Security notes:
- Images are only inlined when they resolve inside the project folder
- Output folder cleanup refuses to leave the project folder
- Folder paths are validated before use
"""
import os
import re
import base64
import fnmatch
import mimetypes
import shutil
from typing import Dict, Iterable, List, Optional, Tuple
from urllib.parse import unquote

import markdown
from bs4 import BeautifulSoup

try:
    import tomli as toml  # Python < 3.11
except ImportError:
    import tomllib as toml  # Python >= 3.11

from prism_aliases import (
    PRISM_CDN,
    PrismAliasResolver,
    collect_languages,
    component_urls,
    default_resolver,
    expand_requirements,
)

# ---------- Defaults ----------
CONFIG_FILE = "print.toml"
OUTPUT_FILE = "combined_output.html"
DEFAULT_EXTENSIONS = [".js", ".ts", ".cpp", ".py", ".java", ".go", ".c", ".sh", ".rs"]
DEFAULT_IGNORE = ["node_modules/", ".git/", "__pycache__/", "*.min.js"]
MARKDOWN_EXTENSIONS = (".md", ".markdown")
MARKDOWN_PLUGINS = ["fenced_code", "tables", "sane_lists"]

KATEX_VERSION = "0.16.9"
KATEX_CDN = f"https://cdn.jsdelivr.net/npm/katex@{KATEX_VERSION}/dist"

PAGE_BREAK = '<div class="page-break"></div>'
AUTO_PRINT_SCRIPT = '<script>window.addEventListener("load", function() { window.print(); });</script>'


# ---------- Configuration ----------

class PrintConfig:
    """Settings for one build, normally read from print.toml."""
    def __init__(self, title: str = "", extensions: Optional[List[str]] = None,
                 ignore: Optional[List[str]] = None, output_dir: str = "print",
                 max_line_length: int = 65, line_numbers: bool = True,
                 math: bool = True, inline_images: bool = True,
                 auto_print: bool = True, keep_markdown: bool = False,
                 prism_theme: str = "prism", template: Optional[str] = None):
        self.title = title
        self.extensions = list(DEFAULT_EXTENSIONS if extensions is None else extensions)
        self.ignore = list(DEFAULT_IGNORE if ignore is None else ignore)
        self.output_dir = output_dir
        self.max_line_length = max_line_length
        self.line_numbers = line_numbers
        self.math = math
        self.inline_images = inline_images
        self.auto_print = auto_print
        self.keep_markdown = keep_markdown
        self.prism_theme = prism_theme
        self.template = template

    def __repr__(self):
        return f"PrintConfig(title={self.title}, output_dir={self.output_dir})"


_BOOL_KEYS = ("line_numbers", "math", "inline_images", "auto_print", "keep_markdown")


def _string_list(key: str, value) -> List[str]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValueError(f"'{key}' must be a list of strings")
    return value


def config_from_mapping(data: Dict, default_title: str = "") -> PrintConfig:
    """
    Build a PrintConfig from the [print] table of print.toml.

    Unknown keys are ignored; invalid values raise ValueError naming the key.
    """
    config = PrintConfig(title=default_title)

    if "title" in data:
        if not isinstance(data["title"], str):
            raise ValueError("'title' must be a string")
        config.title = data["title"].strip() or default_title

    if "extensions" in data:
        exts = _string_list("extensions", data["extensions"])
        config.extensions = [e.lower() if e.startswith(".") else "." + e.lower() for e in exts]

    if "ignore" in data:
        config.ignore = _string_list("ignore", data["ignore"])

    if "output_dir" in data:
        out = data["output_dir"]
        if not isinstance(out, str) or not re.match(r'^[a-zA-Z0-9][a-zA-Z0-9._-]*$', out):
            raise ValueError("'output_dir' must be a plain folder name")
        config.output_dir = out

    if "max_line_length" in data:
        length = data["max_line_length"]
        if isinstance(length, bool) or not isinstance(length, int) or length <= 0:
            raise ValueError("'max_line_length' must be a positive integer")
        config.max_line_length = length

    for key in _BOOL_KEYS:
        if key in data:
            if not isinstance(data[key], bool):
                raise ValueError(f"'{key}' must be true or false")
            setattr(config, key, data[key])

    if "prism_theme" in data:
        theme = data["prism_theme"]
        if not isinstance(theme, str) or not re.match(r'^prism(-[a-z]+)*$', theme):
            raise ValueError("'prism_theme' must name a Prism theme, e.g. prism-okaidia")
        config.prism_theme = theme

    if "template" in data:
        if not isinstance(data["template"], str) or not data["template"].strip():
            raise ValueError("'template' must be a path")
        config.template = data["template"]

    return config


def load_print_config(folder: str, filename: str = CONFIG_FILE) -> PrintConfig:
    """Read print.toml from ``folder``; defaults apply when it is absent."""
    default_title = os.path.basename(os.path.normpath(os.path.abspath(folder)))
    config_path = os.path.join(folder, filename)
    if not os.path.isfile(config_path):
        return PrintConfig(title=default_title)

    try:
        with open(config_path, "rb") as f:
            data = toml.load(f)
    except toml.TOMLDecodeError as e:
        raise ValueError(f"Failed to parse {filename}: {e}") from e

    table = data.get("print", {})
    if not isinstance(table, dict):
        raise ValueError(f"[print] in {filename} must be a table")
    return config_from_mapping(table, default_title)


# ---------- Paths ----------

def validate_folder_path(folder_path: str) -> Tuple[bool, str]:
    """
    Validate a project folder path for security.
    Returns: (is_valid, error_message)
    """
    if not folder_path or not folder_path.strip():
        return False, "Folder path is empty."

    normalized = os.path.normpath(folder_path)
    if '..' in normalized.split(os.sep):
        return False, "Path traversal patterns (..) are not allowed."

    abs_path = os.path.abspath(normalized)
    sensitive_dirs = ['/etc', '/sys', '/proc', '/dev', '/boot']
    for sensitive in sensitive_dirs:
        if abs_path == sensitive or abs_path.startswith(sensitive + os.sep):
            return False, f"Access to system directory '{sensitive}' is not allowed."

    return True, ""


def _is_within(path: str, root: str) -> bool:
    return path == root or path.startswith(root + os.sep)


def safe_read_bytes(base_dir: str, relative_path: str, root_dir: Optional[str] = None) -> bytes:
    """
    Read ``relative_path`` (relative to ``base_dir``) only if it resolves
    inside ``root_dir`` (defaults to ``base_dir``). Symlinks are resolved.
    """
    root_abs = os.path.realpath(root_dir or base_dir)
    target_abs = os.path.realpath(os.path.join(base_dir, relative_path))
    if not _is_within(target_abs, root_abs):
        raise ValueError(f"Security violation: Path '{relative_path}' resolves outside the project folder.")
    with open(target_abs, "rb") as f:
        return f.read()


def to_posix(path: str) -> str:
    return path.replace(os.sep, "/")


# ---------- File collection ----------

def is_ignored(rel_path: str, patterns: Iterable[str], is_dir: bool = False) -> bool:
    """
    Check a relative POSIX path against fnmatch-style ignore patterns.

    A pattern matches the whole path or any single component; a trailing
    slash restricts it to directories.
    """
    parts = rel_path.split("/")
    for pattern in patterns:
        dir_only = pattern.endswith("/")
        pat = pattern.strip("/")
        if not pat:
            continue
        if dir_only and not is_dir:
            components = parts[:-1]
        else:
            components = parts
            if fnmatch.fnmatch(rel_path, pat):
                return True
        if any(fnmatch.fnmatch(part, pat) for part in components):
            return True
    return False


def collect_source_files(folder: str, extensions: Iterable[str] = DEFAULT_EXTENSIONS,
                         ignore_patterns: Iterable[str] = DEFAULT_IGNORE,
                         output_dir: str = "print") -> Tuple[List[str], List[str]]:
    """
    Walk ``folder`` and return (code_files, markdown_files) as absolute paths.

    Hidden folders, the output folder and ignored paths are skipped.
    """
    root = os.path.abspath(folder)
    exts = {e.lower() for e in extensions}
    patterns = list(ignore_patterns)
    code_files = []
    markdown_files = []

    for dirpath, dirnames, filenames in os.walk(root):
        rel_dir = os.path.relpath(dirpath, root)
        rel_dir = "" if rel_dir == "." else to_posix(rel_dir) + "/"

        kept = []
        for d in sorted(dirnames):
            rel = rel_dir + d
            if d.startswith("."):
                continue
            if rel == output_dir or is_ignored(rel, patterns, is_dir=True):
                continue
            kept.append(d)
        dirnames[:] = kept

        for name in sorted(filenames):
            rel = rel_dir + name
            if is_ignored(rel, patterns):
                continue
            full_path = os.path.join(dirpath, name)
            ext = os.path.splitext(name)[1].lower()
            if ext in MARKDOWN_EXTENSIONS:
                markdown_files.append(full_path)
            elif ext in exts:
                code_files.append(full_path)

    return code_files, markdown_files


# ---------- Code to Markdown ----------

def wrap_long_lines(text: str, max_line_length: int = 65) -> str:
    """
    Break lines longer than ``max_line_length`` at the last space inside the
    window, or hard at the limit when there is none.
    """
    if not max_line_length or max_line_length <= 0:
        return text

    result = []
    for line in text.split("\n"):
        if len(line) <= max_line_length:
            result.append(line)
            continue

        chunks = []
        indent = len(line) - len(line.lstrip(" "))
        i = 0
        while i < len(line):
            # The first chunk never splits inside its own indentation
            start = indent if not chunks else i
            split_point = line.rfind(" ", start, i + max_line_length + 1)
            if split_point == -1 or split_point <= i:
                split_point = i + max_line_length
            chunk = line[i:split_point]
            # First chunk keeps its indentation
            chunks.append(chunk.rstrip() if not chunks else chunk.strip())
            i = split_point
            if len(line) - i <= max_line_length:
                chunks.append(line[i:].strip())
                break
        result.append("\n".join(chunks))

    return "\n".join(result)


def make_fence(code: str) -> str:
    """A backtick fence longer than any backtick run inside ``code``."""
    longest = max((len(run) for run in re.findall(r"`+", code)), default=0)
    return "`" * max(3, longest + 1)


def _escape_inline_markdown(text: str) -> str:
    return re.sub(r"([\\`*_\[\]])", r"\\\1", text)


def code_to_markdown(file_path: str, max_line_length: int = 65) -> str:
    """
    Wrap a source file in a fenced Markdown block.

    The block is preceded by a bold ``parent/file`` header and tagged with the
    file extension (``py``, ``rs`` ...); the alias resolver maps it to a Prism
    component later.
    """
    with open(file_path, "r", encoding="utf-8", errors="replace") as f:
        code = f.read()

    language = os.path.splitext(file_path)[1][1:]
    header = os.path.basename(os.path.dirname(os.path.abspath(file_path))) + "/" + os.path.basename(file_path)
    code = wrap_long_lines(code.rstrip("\n"), max_line_length)
    fence = make_fence(code)

    return f"\n**{_escape_inline_markdown(header)}**\n\n{fence}{language}\n{code}\n{fence}\n"


def intermediate_name(rel_path: str) -> str:
    """File name for a document's Markdown copy inside the output folder."""
    name = to_posix(rel_path).replace("/", "__")
    if not name.lower().endswith(MARKDOWN_EXTENSIONS):
        name += ".md"
    return name


# ---------- Markdown rewriting ----------

FENCE_OPEN_RE = re.compile(r"^ {0,3}(`{3,}|~{3,})")
LINK_RE = re.compile(r'(!?)\[([^\]]*)\]\(\s*(<[^>]*>|[^)\s]+)(\s+"[^"]*")?\s*\)')
SCHEME_RE = re.compile(r'^[a-zA-Z][a-zA-Z0-9+.-]*:')


def split_fenced(text: str) -> List[Tuple[bool, str]]:
    """Split Markdown into (is_code, chunk) pieces along fenced code blocks."""
    pieces: List[Tuple[bool, List[str]]] = []
    fence = None
    for line in text.splitlines(keepends=True):
        if fence is None:
            match = FENCE_OPEN_RE.match(line)
            if match:
                fence = match.group(1)
                pieces.append((True, [line]))
                continue
        else:
            stripped = line.strip()
            if stripped and set(stripped) == {fence[0]} and len(stripped) >= len(fence):
                fence = None
            pieces[-1][1].append(line)
            continue
        if pieces and not pieces[-1][0]:
            pieces[-1][1].append(line)
        else:
            pieces.append((False, [line]))
    return [(is_code, "".join(lines)) for is_code, lines in pieces]


def _rewrite_target(target: str, is_image: bool, source_dir: str,
                    output_dir: str, anchors: Dict[str, str]) -> str:
    bracketed = target.startswith("<") and target.endswith(">")
    bare = target[1:-1] if bracketed else target
    if not bare or bare.startswith(("#", "/", "//")) or SCHEME_RE.match(bare):
        return target

    path, sep, fragment = bare.partition("#")
    resolved = os.path.normpath(os.path.join(source_dir, unquote(path)))

    if not is_image and resolved.lower().endswith(MARKDOWN_EXTENSIONS):
        anchor = anchors.get(resolved)
        if anchor:
            return "#" + anchor

    relative = to_posix(os.path.relpath(resolved, output_dir)) + (sep + fragment if sep else "")
    return f"<{relative}>" if bracketed else relative


def rewrite_markdown_links(text: str, source_dir: str, output_dir: str,
                           anchors: Optional[Dict[str, str]] = None) -> str:
    """
    Rewrite relative links and images so they resolve from ``output_dir``.

    Links to Markdown files that are part of the batch (keys of ``anchors``,
    absolute paths) become in-document anchors. Fenced code is left alone.
    """
    anchors = anchors or {}

    def replace(match):
        bang, label, target, title = match.groups()
        new_target = _rewrite_target(target, bool(bang), source_dir, output_dir, anchors)
        return f"{bang}[{label}]({new_target}{title or ''})"

    return "".join(
        chunk if is_code else LINK_RE.sub(replace, chunk)
        for is_code, chunk in split_fenced(text)
    )


# ---------- Markdown rendering ----------

DISPLAY_MATH_RE = re.compile(r"\$\$([^$]+)\$\$")
# Not preceded by a backslash or $, no whitespace just inside the delimiters,
# and no digit right after the closing $ (keeps "$5 and $10" as text)
INLINE_MATH_RE = re.compile(r"(?<![\\$])\$(?=\S)([^$\n]+?)(?<=\S)\$(?![$\d])")
MATH_PLACEHOLDER_RE = re.compile(r"@@MATH_(DISPLAY|INLINE)_(\d+)@@")


def protect_math(text: str) -> Tuple[str, List[str]]:
    """Swap math expressions for placeholders the Markdown parser ignores."""
    stash: List[str] = []

    def stash_as(kind):
        def repl(match):
            stash.append(match.group(0))
            return f"@@MATH_{kind}_{len(stash) - 1}@@"
        return repl

    text = DISPLAY_MATH_RE.sub(stash_as("DISPLAY"), text)
    text = INLINE_MATH_RE.sub(stash_as("INLINE"), text)
    return text, stash


def restore_math(html: str, stash: List[str]) -> str:
    def repl(match):
        idx = int(match.group(2))
        if idx >= len(stash):
            return match.group(0)
        return escape_html_text(stash[idx])
    return MATH_PLACEHOLDER_RE.sub(repl, html)


def render_markdown(text: str, math: bool = True) -> str:
    """Render Markdown to an HTML fragment."""
    if not math:
        return markdown.markdown(text, extensions=MARKDOWN_PLUGINS)
    protected, stash = protect_math(text)
    html = markdown.markdown(protected, extensions=MARKDOWN_PLUGINS)
    return restore_math(html, stash)


# ---------- HTML post-processing ----------

def normalize_code_languages(html: str, resolver: Optional[PrismAliasResolver] = None) -> str:
    """Rewrite ``language-<tag>`` classes on code blocks to canonical Prism ids."""
    resolver = resolver or default_resolver()
    soup = BeautifulSoup(html, "html.parser")
    for code in soup.find_all("code", class_=True):
        classes = []
        for cls in code.get("class", []):
            if cls.startswith("language-"):
                lang_id = resolver.resolve_language(cls[len("language-"):])
                if lang_id:
                    cls = "language-" + lang_id
            classes.append(cls)
        code["class"] = classes
    return str(soup)


def add_line_numbers(html: str) -> str:
    """Mark highlighted <pre> blocks for the Prism line-numbers plugin."""
    soup = BeautifulSoup(html, "html.parser")
    for pre in soup.find_all("pre"):
        code = pre.find("code")
        if code is None:
            continue
        if not any(c.startswith("language-") for c in code.get("class", [])):
            continue
        classes = pre.get("class", [])
        if "line-numbers" not in classes:
            pre["class"] = classes + ["line-numbers"]
    return str(soup)


def inline_images(html: str, base_dir: str, root_dir: Optional[str] = None) -> Tuple[str, List[str]]:
    """
    Replace local <img> sources with base64 data URIs.

    Sources resolve against ``base_dir`` and must stay inside ``root_dir``.
    Returns the new HTML and warnings for images that were left as-is.
    """
    soup = BeautifulSoup(html, "html.parser")
    warnings = []
    for img in soup.find_all("img", src=True):
        src = img["src"]
        if src.startswith("//") or SCHEME_RE.match(src):
            continue
        path = unquote(src.split("#", 1)[0].split("?", 1)[0])
        mime, _ = mimetypes.guess_type(path)
        if not mime or not mime.startswith("image/"):
            warnings.append(f"Skipped image with unknown type: {src}")
            continue
        try:
            data = safe_read_bytes(base_dir, path, root_dir)
        except ValueError as e:
            warnings.append(str(e))
            continue
        except OSError as e:
            warnings.append(f"Failed to read image {src}: {e}")
            continue
        img["src"] = f"data:{mime};base64,{base64.b64encode(data).decode('ascii')}"
    return str(soup), warnings


# ---------- HTML assembly ----------

def escape_html(s: str) -> str:
    """Escape HTML special characters including quotes."""
    if not s:
        return ""
    return (s.replace("&", "&amp;")
             .replace("<", "&lt;")
             .replace(">", "&gt;")
             .replace('"', "&quot;")
             .replace("'", "&#x27;"))


def escape_html_text(s: str) -> str:
    """Escape text content; quotes are left readable."""
    return s.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def slugify(s: str) -> str:
    slug = re.sub(r"[^a-z0-9]+", "-", (s or "").lower()).strip("-")
    return slug or "document"


PLACEHOLDER_RE = re.compile(r"\{\{\s*([A-Za-z_][A-Za-z0-9_]*)\s*\}\}")


def render_template(template: str, values: Dict[str, str]) -> str:
    """Fill ``{{ name }}`` placeholders; unknown names are left untouched."""
    def repl(match):
        key = match.group(1)
        return str(values[key]) if key in values else match.group(0)
    return PLACEHOLDER_RE.sub(repl, template)


DEFAULT_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{{ title }}</title>
{{ head }}
<style>
{{ styles }}
</style>
</head>
<body>
{{ content }}
{{ scripts }}
</body>
</html>
"""

PRINT_CSS = "\n".join([
    "body{font-size:16px;font-family:Helvetica,sans-serif;line-height:1.6;max-width:100%;overflow-x:hidden;margin:0 auto;padding:1rem}",
    ".page-break{page-break-before:always;break-before:page}",
    "pre[class*=\"language-\"],code[class*=\"language-\"]{white-space:pre-wrap;word-break:break-word;overflow:auto}",
    "pre{background:#f6f8fa;padding:1rem;border-radius:.3rem}",
    "img{max-width:100%;height:auto}",
    "table{border-collapse:collapse}th,td{border:1px solid #ddd;padding:.4rem}",
    "@media print{body{font-size:11pt;padding:0}pre,table,img{page-break-inside:avoid}h1,h2,h3,h4,h5,h6{page-break-after:avoid}pre[class*=\"language-\"]{overflow:visible}}",
])


def validate_template(template: str) -> None:
    if "content" not in {m.group(1) for m in PLACEHOLDER_RE.finditer(template)}:
        raise ValueError("Template must contain a {{ content }} placeholder")


def load_template(folder: str, config: PrintConfig) -> str:
    """The configured custom template, or the built-in one."""
    if not config.template:
        return DEFAULT_TEMPLATE
    try:
        template = safe_read_bytes(folder, config.template).decode("utf-8")
    except UnicodeDecodeError as e:
        raise ValueError(f"Template {config.template} is not UTF-8 text") from e
    validate_template(template)
    return template


class Document:
    """One Markdown document in the print job."""
    def __init__(self, source: str, rel_path: str, markdown_text: str, anchor: str = ""):
        self.source = source
        self.rel_path = rel_path
        self.markdown = markdown_text
        self.anchor = anchor or "doc-" + slugify(rel_path)
        self.html = ""

    def __repr__(self):
        return f"Document(rel_path={self.rel_path}, anchor={self.anchor})"


def assign_anchors(documents: List[Document]) -> Dict[str, str]:
    """Make document anchors unique; returns source path -> anchor."""
    used = set()
    mapping = {}
    for doc in documents:
        base = doc.anchor
        anchor = base
        counter = 1
        while anchor in used:
            anchor = f"{base}-{counter}"
            counter += 1
        used.add(anchor)
        doc.anchor = anchor
        mapping[os.path.normpath(doc.source)] = anchor
    return mapping


def render_document(doc: Document, resolver: Optional[PrismAliasResolver] = None,
                    line_numbers: bool = True, math: bool = True) -> str:
    """Render a document's Markdown into its HTML fragment."""
    html = render_markdown(doc.markdown, math=math)
    html = normalize_code_languages(html, resolver)
    if line_numbers:
        html = add_line_numbers(html)
    doc.html = html
    return html


def asset_tags(languages: List[str], config: PrintConfig) -> Tuple[str, str]:
    """(head, scripts) markup for the Prism and KaTeX assets a build needs."""
    head = [f'<link rel="stylesheet" href="{PRISM_CDN}/themes/{config.prism_theme}.min.css">']
    scripts = [f'<script src="{PRISM_CDN}/prism.min.js"></script>']
    scripts += [f'<script src="{url}"></script>' for url in component_urls(expand_requirements(languages))]

    if config.line_numbers:
        head.append(f'<link rel="stylesheet" href="{PRISM_CDN}/plugins/line-numbers/prism-line-numbers.min.css">')
        scripts.append(f'<script src="{PRISM_CDN}/plugins/line-numbers/prism-line-numbers.min.js"></script>')

    if config.math:
        head.append(f'<link rel="stylesheet" href="{KATEX_CDN}/katex.min.css">')
        scripts.append(f'<script src="{KATEX_CDN}/katex.min.js"></script>')
        scripts.append(f'<script src="{KATEX_CDN}/contrib/auto-render.min.js"></script>')

    init = [
        '<script>',
        'document.addEventListener("DOMContentLoaded", function() {',
    ]
    if config.math:
        init += [
            '  if (window.renderMathInElement) {',
            '    renderMathInElement(document.body, {',
            '      delimiters: [',
            '        {left: "$$", right: "$$", display: true},',
            '        {left: "$", right: "$", display: false}',
            '      ],',
            '      throwOnError: false',
            '    });',
            '  }',
        ]
    init += [
        '  if (window.Prism) { Prism.highlightAll(); }',
        '});',
    ]
    init.append("</script>")
    scripts.append("\n".join(init))
    if config.auto_print:
        scripts.append(AUTO_PRINT_SCRIPT)

    return "\n".join(head), "\n".join(scripts)


def build_document(documents: List[Document], config: PrintConfig,
                   resolver: Optional[PrismAliasResolver] = None,
                   template: str = DEFAULT_TEMPLATE) -> Tuple[str, List[str]]:
    """
    Concatenate rendered documents into one print-ready HTML page.

    Returns the HTML and the canonical Prism languages it attaches.
    """
    resolver = resolver or default_resolver()
    languages = collect_languages((doc.markdown for doc in documents), resolver)

    sections = []
    for doc in documents:
        if sections:
            sections.append(PAGE_BREAK)
        sections.append(
            f'<section class="document" id="{escape_html(doc.anchor)}" '
            f'data-source="{escape_html(doc.rel_path)}">\n{doc.html}\n</section>'
        )

    head, scripts = asset_tags(languages, config)
    html = render_template(template, {
        "title": escape_html(config.title or "Print"),
        "head": head,
        "styles": PRINT_CSS,
        "content": "\n".join(sections),
        "scripts": scripts,
    })
    return html, languages


class BuildResult:
    """Outcome of a print build."""
    def __init__(self, output_path: str, html: str, documents: List[Document],
                 languages: List[str], warnings: List[str]):
        self.output_path = output_path
        self.html = html
        self.documents = documents
        self.languages = languages
        self.warnings = warnings


# ---------- Cleanup ----------

def clean_print_folder(folder: str, output_dir: str = "print") -> bool:
    """
    Remove the generated output folder.
    Returns True if something was removed.
    """
    root = os.path.realpath(folder)
    target = os.path.realpath(os.path.join(folder, output_dir))
    if target == root or not _is_within(target, root):
        raise ValueError(f"Refusing to remove '{output_dir}': not inside the project folder.")
    if not os.path.isdir(target):
        return False
    shutil.rmtree(target)
    return True


def sanitize_filename_for_format(name: str, extension: str) -> str:
    """Sanitize filename for a specific format extension."""
    if not name:
        return f"document{extension}"

    name = re.sub(r'[^\w\s._-]', '', name)
    name = re.sub(r'[\s]+', '_', name)
    name = name.strip('._-')

    if not name:
        return f"document{extension}"

    if name.lower().endswith(extension):
        name = name[:-len(extension)]

    # Truncate by byte count for Unicode safety
    max_base_bytes = 255 - len(extension.encode('utf-8'))
    name = name[:max_base_bytes]
    while len(name.encode('utf-8')) > max_base_bytes:
        name = name[:-1]

    return name + extension
