"""Output generators for documentation."""

from __future__ import annotations

import re
from datetime import datetime
from enum import Enum
from typing import Sequence

from .exceptions import UnknownFormatError
from .models import FunctionDoc, ModuleDoc

STYLESHEET = """\
.module-header, .module-description { background-color: #EFEFEF; }
.module-header, .module-description {
    border: 1px solid;
    border-radius: 5px;
    padding: 10px;
    margin: 10px 0 10px 0;
}
.module-name { font-weight: bold; }
.module-description .module-name { font-size: 120%; }
ul.module-functions { list-style: none; }
.module-name, .module-author, .module-date { margin: 2px 0 2px 0; }
.module-desc { margin: 10px 0 10px 20px; }
.function-description {
    background-color: #DDD;
    border: 1px dotted;
    border-radius: 5px;
    padding: 10px;
    margin: 5px 0 5px 0;
}
.function-desc { margin: 5px 0 5px 20px; }
html { scroll-behavior: smooth; }
a, a:visited { color: #00F; text-decoration: none; }
a:hover { border-bottom: 1px solid #00F; }
.top-scroll {
    position: fixed;
    bottom: 0;
    right: 10px;
    font-weight: bold;
    font-size: 180%;
    border: 1px solid;
    border-radius: 5px;
    padding: 10px 20px;
    background-color: #EFEFEF;
    opacity: 0.8;
}"""


def pretty_hm_type(signature: str) -> str:
    """Replace ASCII arrows in a type signature with HTML arrow entities."""
    return signature.replace("->", "&#8594;").replace("=>", "&#8658;")


def _paragraphs(text: str) -> str:
    """Turn blank-line paragraph breaks into HTML line breaks."""
    return text.replace("\n\n", "<br><br>")


def _module_id(module: ModuleDoc) -> str:
    return f"doc.module.{module.name}"


def _function_id(module: ModuleDoc, fn: FunctionDoc) -> str:
    return f"doc.module.{module.name}.func.{fn.name}"


def _html_module_synopsis(module: ModuleDoc) -> list[str]:
    lines = [
        '<div class="module-header">',
        '<div class="module-name">',
        f'Module: <a href="#{_module_id(module)}">{module.name}</a>',
        "</div>",
        '<ul class="module-functions">',
    ]
    for fn in module.functions:
        lines.append(
            f'<li><a href="#{_function_id(module, fn)}"><b>{fn.name}</b></a>'
            f" <b>::</b> {pretty_hm_type(fn.signature)}</li>"
        )
    lines.extend(["</ul>", "</div>"])
    return lines


def _html_function_description(module: ModuleDoc, fn: FunctionDoc) -> list[str]:
    return [
        f'<div class="function-description" id="{_function_id(module, fn)}">',
        '<div class="function-name">',
        f"<b>{fn.name}</b> <b>::</b> {pretty_hm_type(fn.signature)}",
        "</div>",
        '<div class="function-desc">',
        _paragraphs(fn.description),
        "</div>",
        "</div>",
    ]


def _html_module_description(module: ModuleDoc) -> list[str]:
    lines = [
        f'<div class="module-description" id="{_module_id(module)}">',
        f'<div class="module-name">Module: {module.name}</div>',
        f'<div class="module-author"><b>Written By:</b> {" and ".join(module.authors)}</div>',
        f'<div class="module-date"><b>Written On:</b> {module.date}</div>',
        f'<div class="module-desc">{_paragraphs(module.description)}</div>',
        '<div class="module-functions">',
    ]
    for fn in module.functions:
        lines.extend(_html_function_description(module, fn))
    lines.extend(["</div>", "</div>"])
    return lines


def generate_html(
    project_name: str,
    modules: Sequence[ModuleDoc],
    generated_at: datetime | None = None,
) -> str:
    """Generate a standalone HTML page documenting ``modules``."""
    generated_at = generated_at or datetime.now()

    lines = [
        "<html>",
        "<head>",
        f"<title>{project_name} Documentation</title>",
        "<style>",
        STYLESHEET,
        "</style>",
        "</head>",
        "<body>",
        '<div class="project-header" id="top">',
        f"<h1>{project_name} Documentation</h1>",
        "</div>",
        '<div class="project-synopsis">',
        "<h2>Module List</h2>",
    ]
    for module in modules:
        lines.extend(_html_module_synopsis(module))
    lines.extend(
        [
            "</div>",
            '<div class="project-description">',
            "<h2>Module Description</h2>",
        ]
    )
    for module in modules:
        lines.extend(_html_module_description(module))
    lines.extend(
        [
            "</div>",
            '<div class="top-scroll"><a href="#top">&#8593;</a></div>',
            '<div class="footer">',
            "This documentation was generated by <code>hmdoc</code>"
            f" on <code>{generated_at:%c}</code>",
            "</div>",
            "</body>",
            "</html>",
            "",
        ]
    )
    return "\n".join(lines)


def module_anchor(name: str) -> str:
    """Markdown anchor for a module: whitespace and dots become hyphens."""
    return re.sub(r"[\s.]", "-", name).lower()


def format_authors(authors: Sequence[str]) -> str:
    """Join authors as "A", "A, and B" or "A, B, and C"."""
    if not authors:
        return ""
    if len(authors) == 1:
        return authors[0]
    return ", ".join(authors[:-1]) + ", and " + authors[-1]


def _markdown_function(fn: FunctionDoc) -> str:
    return f"#### {fn.name} :: {pretty_hm_type(fn.signature)}\n{fn.description}".strip()


def _markdown_module(module: ModuleDoc) -> str:
    lines = [
        f"## {module.name}",
        f'<a name="{module_anchor(module.name)}"></a>',
        f"**Written By:** {format_authors(module.authors)}",
        "",
        f"**Written On:** {module.date}",
        "",
        module.description,
    ]
    lines.extend(_markdown_function(fn) for fn in module.functions)
    return "\n".join(lines).strip()


def generate_markdown(project_name: str, modules: Sequence[ModuleDoc]) -> str:
    """Generate a Markdown document documenting ``modules``."""
    lines = [
        f"# {project_name} Documentation",
        "",
        "## Modules:",
        "Click a module name below to see its documentation",
        "",
    ]
    for module in modules:
        lines.append(f"* [{module.name}](#{module_anchor(module.name)})")
    for module in modules:
        lines.append(_markdown_module(module))
    lines.append("")
    return "\n".join(lines)


class OutputFormat(str, Enum):
    """Supported output formats."""

    HTML = "html"
    MARKDOWN = "markdown"

    @classmethod
    def from_name(cls, name: str) -> OutputFormat:
        try:
            return cls(name.strip().lower())
        except ValueError:
            choices = ", ".join(f.value for f in cls)
            raise UnknownFormatError(
                f"Unknown output format {name!r} (expected one of: {choices})"
            ) from None

    def render(self, project_name: str, modules: Sequence[ModuleDoc]) -> str:
        """Render ``modules`` in this format."""
        if self is OutputFormat.MARKDOWN:
            return generate_markdown(project_name, modules)
        return generate_html(project_name, modules)
