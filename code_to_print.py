"""
Code to Print - Streamlit UI

Collects the source code and Markdown of a project folder into one
print-ready HTML document:
- Code files become fenced Markdown blocks (long lines wrapped for paper)
- Markdown is copied through with relative links/images rewritten
- Only the Prism components the fenced blocks actually use are attached
- KaTeX renders $...$ and $$...$$; the page opens the print dialog on load

Output goes to <folder>/print/combined_output.html. Settings are seeded
from an optional print.toml in the project folder.
"""
import os
import webbrowser
from pathlib import Path
from typing import List, Optional

import streamlit as st

from prism_aliases import PrismAliasResolver, default_resolver
from print_converter import (
    AUTO_PRINT_SCRIPT,
    CONFIG_FILE,
    DEFAULT_TEMPLATE,
    MARKDOWN_EXTENSIONS,
    OUTPUT_FILE,
    BuildResult,
    Document,
    PrintConfig,
    assign_anchors,
    build_document,
    clean_print_folder,
    code_to_markdown,
    collect_source_files,
    inline_images,
    intermediate_name,
    load_print_config,
    load_template,
    render_document,
    rewrite_markdown_links,
    sanitize_filename_for_format,
    to_posix,
    validate_folder_path,
)

# ---------- App config ----------
APP_TITLE = "Code -> Print-ready HTML"
PRISM_THEMES = ["prism", "prism-coy", "prism-okaidia", "prism-solarizedlight", "prism-tomorrow", "prism-twilight"]


# ---------- Pipeline ----------

def is_markdown_document(doc: Document) -> bool:
    return doc.source.lower().endswith(MARKDOWN_EXTENSIONS)


def prepare_documents(folder: str, config: PrintConfig) -> List[Document]:
    """
    Gather the folder's Markdown and converted code files as documents.

    Existing Markdown comes first, then code files in path order. Files that
    cannot be read are reported and skipped.
    """
    code_files, md_files = collect_source_files(
        folder, config.extensions, config.ignore, config.output_dir
    )

    if not code_files and not md_files:
        st.warning("No code or markdown files found.")
        return []

    if not code_files:
        st.warning("No code files found.")
    else:
        st.info(f"Found {len(code_files)} code files. Converting to Markdown")

    root = os.path.abspath(folder)
    documents = []

    for path in md_files:
        rel = to_posix(os.path.relpath(path, root))
        try:
            with open(path, "r", encoding="utf-8", errors="replace") as f:
                documents.append(Document(path, rel, f.read()))
        except OSError as e:
            st.error(f"Failed to read {rel}: {e}")

    for path in code_files:
        rel = to_posix(os.path.relpath(path, root))
        try:
            documents.append(Document(path, rel, code_to_markdown(path, config.max_line_length)))
        except OSError:
            st.error(f"Failed to convert {rel} to Markdown.")

    anchors = assign_anchors(documents)
    output_dir = os.path.join(root, config.output_dir)
    for doc in documents:
        if is_markdown_document(doc):
            doc.markdown = rewrite_markdown_links(
                doc.markdown, os.path.dirname(doc.source), output_dir, anchors
            )

    return documents


def run_print_job(folder: str, config: PrintConfig,
                  resolver: Optional[PrismAliasResolver] = None,
                  template: Optional[str] = None) -> Optional[BuildResult]:
    """Convert, render and combine the folder into the print HTML file."""
    resolver = resolver or default_resolver()
    root = os.path.abspath(folder)
    output_dir = os.path.join(root, config.output_dir)

    documents = prepare_documents(root, config)
    if not documents:
        return None

    os.makedirs(output_dir, exist_ok=True)

    intermediates = []
    rendered = []
    for doc in documents:
        md_path = os.path.join(output_dir, intermediate_name(doc.rel_path))
        try:
            with open(md_path, "w", encoding="utf-8") as f:
                f.write(doc.markdown)
            intermediates.append(md_path)
        except OSError as e:
            st.error(f"Failed to write Markdown for {doc.rel_path}: {e}")

        try:
            render_document(doc, resolver, line_numbers=config.line_numbers, math=config.math)
            rendered.append(doc)
        except Exception as e:
            st.error(f"Failed to process {doc.rel_path}: {e}")

    html, languages = build_document(rendered, config, resolver, template or DEFAULT_TEMPLATE)

    warnings = []
    if config.inline_images:
        html, warnings = inline_images(html, output_dir, root)
        for warning in warnings:
            st.warning(warning)

    output_path = os.path.join(output_dir, OUTPUT_FILE)
    try:
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(html)
    except OSError as e:
        st.error(f"Failed to write combined HTML: {e}")
        return None

    if not config.keep_markdown:
        for md_path in intermediates:
            try:
                os.remove(md_path)
            except OSError as e:
                st.warning(f"Could not remove {os.path.basename(md_path)}: {e}")

    return BuildResult(output_path, html, rendered, languages, warnings)


def open_for_printing(output_path: str) -> bool:
    """Open the combined HTML in the system browser."""
    return webbrowser.open(Path(output_path).resolve().as_uri())


def parse_list_input(value: str) -> List[str]:
    """Split comma- or newline-separated widget input."""
    items = []
    for line in (value or "").replace(",", "\n").split("\n"):
        item = line.strip()
        if item:
            items.append(item)
    return items


# ---------- Streamlit UI ----------
st.set_page_config(page_title=APP_TITLE, layout="wide")
st.title(APP_TITLE)
st.caption("Collect a folder of source code and Markdown into one print-ready HTML document with syntax highlighting, math rendering and page breaks between files.")

folder_ok = False
config = PrintConfig()

with st.container(border=True):
    st.subheader("Source")
    st.caption(f"Settings are read from `{CONFIG_FILE}` in the folder when present")
    folder_path = st.text_input(
        "Project folder",
        placeholder="/path/to/your/project",
        help="Absolute or relative path to the folder to print"
    )

    if folder_path:
        is_valid, error_msg = validate_folder_path(folder_path)
        if not is_valid:
            st.error(f"Security Error: {error_msg}")
        elif not os.path.isdir(folder_path):
            st.error("Directory not found. Please enter a valid path.")
        else:
            try:
                config = load_print_config(folder_path)
                folder_ok = True
            except ValueError as e:
                st.error(f"Invalid {CONFIG_FILE}: {e}")

st.divider()

with st.container(border=True):
    st.subheader("Options")

    col1, col2 = st.columns([1, 1], gap="medium")
    with col1:
        title_input = st.text_input("Document title", value=config.title)
        extensions_input = st.text_input(
            "Code file extensions",
            value=", ".join(config.extensions),
            help="Comma-separated, e.g. .py, .rs, .go"
        )
        ignore_input = st.text_area(
            "Ignore patterns",
            value="\n".join(config.ignore),
            height=120,
            help="One pattern per line. A trailing / matches folders only."
        )
    with col2:
        max_line_length = st.number_input(
            "Wrap code lines longer than",
            min_value=20, max_value=400, value=config.max_line_length, step=5
        )
        prism_theme = st.selectbox(
            "Syntax theme",
            PRISM_THEMES,
            index=PRISM_THEMES.index(config.prism_theme) if config.prism_theme in PRISM_THEMES else 0
        )

    st.divider()

    col1, col2, col3 = st.columns([2, 2, 2], gap="large")
    with col1:
        line_numbers = st.toggle("Show line numbers in code blocks", value=config.line_numbers)
        math_enabled = st.toggle("Enable Math/LaTeX rendering", value=config.math)
    with col2:
        inline_images_enabled = st.toggle("Embed local images", value=config.inline_images)
        auto_print = st.toggle("Open print dialog on load", value=config.auto_print)
    with col3:
        keep_markdown = st.toggle("Keep intermediate Markdown", value=config.keep_markdown)

st.divider()

build_col, preview_col = st.columns([1, 3], gap="large")
with build_col:
    st.subheader("Build")
    if st.button("Build print HTML", type="primary", use_container_width=True):
        if not folder_ok:
            st.warning("Enter a valid project folder first.")
        else:
            config.title = title_input.strip() or config.title
            config.extensions = [
                e.lower() if e.startswith(".") else "." + e.lower()
                for e in parse_list_input(extensions_input)
            ]
            config.ignore = parse_list_input(ignore_input)
            config.max_line_length = int(max_line_length)
            config.prism_theme = prism_theme
            config.line_numbers = line_numbers
            config.math = math_enabled
            config.inline_images = inline_images_enabled
            config.auto_print = auto_print
            config.keep_markdown = keep_markdown

            try:
                template = load_template(folder_path, config)
                result = run_print_job(folder_path, config, template=template)
                if result is not None:
                    st.session_state["print_html"] = result.html
                    st.session_state["print_path"] = result.output_path
                    st.session_state["print_name"] = sanitize_filename_for_format(config.title, ".html")
                    st.success(f"Combined HTML written to: {result.output_path}")
                    if result.languages:
                        st.caption("Prism components: " + ", ".join(result.languages))
            except ValueError as e:
                st.error(f"Build failed: {e}")
            except OSError as e:
                st.error(f"Build failed: {e}")

    if "print_html" in st.session_state:
        st.download_button(
            "Download print HTML",
            data=st.session_state["print_html"].encode("utf-8"),
            file_name=st.session_state.get("print_name", "document.html"),
            mime="text/html",
            use_container_width=True
        )
        if st.button("Open for printing", use_container_width=True):
            try:
                if open_for_printing(st.session_state["print_path"]):
                    st.info(f"Opening combined HTML in browser: {st.session_state['print_path']}")
                else:
                    st.warning("No browser available to open the document.")
            except webbrowser.Error as e:
                st.error(f"Failed to open combined HTML in browser: {e}")

    if folder_ok and st.button("Clean print folder", use_container_width=True):
        try:
            if clean_print_folder(folder_path, config.output_dir):
                st.success(f"Removed {config.output_dir}/")
            else:
                st.info("Nothing to clean.")
            for key in ("print_html", "print_path", "print_name"):
                st.session_state.pop(key, None)
        except (ValueError, OSError) as e:
            st.error(f"Failed to clean print folder: {e}")

with preview_col:
    st.subheader("Preview")
    if "print_html" in st.session_state:
        # Keep the print dialog out of the preview frame
        preview_html = st.session_state["print_html"].replace(AUTO_PRINT_SCRIPT, "")
        st.components.v1.html(preview_html, height=650, scrolling=True)
    else:
        st.info("Build to see a live preview here.")
