"""
Terminal Resume Formatter

Formats a parsed resume document as an ANSI-styled, fixed-width terminal view.

Expected document shape (missing fields simply render empty):

    basics:          name, headline, email, url, phone, summary
    work:            - position, name, location, startDate, endDate, summary
    skills:          - name, keywords (sequence)
    education:       - degree, area, institution, startDate, endDate
    certificates:    - name, issuer, date
    languages:       - language, fluency

The resume body may also be wrapped in a top-level "content" mapping.
Each section formatter returns its lines without the left margin; the
margin is applied once by render_resume().
"""

from itertools import zip_longest
from typing import List, Optional

import typer

from termresume.contexts.parsing.document_tree import Mapping, Value
from termresume.contexts.rendering.config import RenderConfig
from termresume.contexts.rendering.layout import (
    gap_between,
    horizontal_rule,
    indent,
    pad_visible,
    right_align,
    section_header,
    word_wrap,
)
from termresume.contexts.rendering.logger import _log_warning, log_render_result
from termresume.utils.dates import date_range, format_date
from termresume.utils.package_info import get_version

CONTACT_SEPARATOR = " · "
DETAIL_SEPARATOR = "  ·  "
FLUENCY_SUFFIX = " Proficiency"


def get_resume_body(document: Value) -> Mapping:
    """
    Get the mapping holding the resume sections.

    Args:
        document: Parsed document root

    Returns:
        The "content" mapping when present, else the root mapping
        (empty Mapping if the root isn't a mapping at all)
    """
    if not isinstance(document, Mapping):
        _log_warning(f"Document root is a {type(document).__name__}, expected a Mapping")
        return Mapping()

    content = document.get("content")
    if isinstance(content, Mapping):
        return content
    return document


def format_header(basics: Mapping, config: RenderConfig) -> List[str]:
    """
    Format the boxed header with name, headline and contact details.

    Args:
        basics: "basics" mapping
        config: Render settings

    Returns:
        Box lines (border included)
    """
    box_width = config.inner_width
    text_width = box_width - 4  # 2 border + 2 inner padding

    name = basics.get_text("name")
    headline = basics.get_text("headline")
    contacts = [basics.get_text(field) for field in ("email", "url", "phone")]
    contact_line = CONTACT_SEPARATOR.join(contact for contact in contacts if contact)

    border = "─" * (box_width - 2)
    side = typer.style("│", fg="cyan")

    def box_row(styled: str) -> str:
        return f"{side}  {pad_visible(styled, text_width)}{side}"

    return [
        typer.style(f"╭{border}╮", fg="cyan"),
        box_row(typer.style(name, fg="bright_white", bold=True)),
        box_row(typer.style(headline, fg="yellow")),
        box_row(typer.style(contact_line, dim=True)),
        typer.style(f"╰{border}╯", fg="cyan"),
    ]


def format_summary(basics: Mapping, config: RenderConfig) -> List[str]:
    """Format the wrapped professional summary (empty list when absent)."""
    summary = basics.get_text("summary")
    if not summary:
        return []
    return [f"  {typer.style(line, dim=True)}" for line in word_wrap(summary, config.inner_width - 2)]


def format_work_entry(job: Mapping, config: RenderConfig) -> List[str]:
    """
    Format a single work experience entry.

    Position and date range share the first line, pushed to opposite ends.
    Company and location follow, then the wrapped summary.

    Args:
        job: Work item mapping
        config: Render settings

    Returns:
        Entry lines (without trailing blank line)
    """
    position = typer.style(job.get_text("position"), fg="bright_white", bold=True)
    dates = typer.style(date_range(job.get_text("startDate"), job.get_text("endDate")), dim=True)
    lines = [f"  {right_align(position, dates, config.inner_width - 2)}"]

    company_parts = [job.get_text("name")]
    if job.get_text("location"):
        company_parts.append(job.get_text("location"))
    lines.append(f"  {typer.style(DETAIL_SEPARATOR.join(company_parts), fg='cyan')}")

    for summary_line in word_wrap(job.get_text("summary"), config.inner_width - 4):
        lines.append(f"  {typer.style(summary_line, dim=True)}")

    return lines


def format_skill(skill: Mapping, config: RenderConfig) -> List[str]:
    """
    Format one skill group.

    Keywords stay on the name's line when they fit; otherwise they wrap onto
    indented lines below the name.
    """
    name = skill.get_text("name")
    keywords = ", ".join(skill.get_sequence("keywords").texts())
    available_width = config.inner_width - len(f"  {name}: ")

    if len(keywords) <= available_width:
        return [f"  {typer.style(name, bold=True)}{typer.style(f': {keywords}', dim=True)}"]

    lines = [f"  {typer.style(name, bold=True)}"]
    for keyword_line in word_wrap(keywords, config.inner_width - 6):
        lines.append(f"    {typer.style(keyword_line, dim=True)}")
    return lines


def format_education_entry(education: Mapping) -> str:
    """Format one education line: "Degree in Area  Institution  Start–End"."""
    degree_area = " in ".join(
        part for part in (education.get_text("degree"), education.get_text("area")) if part
    )
    years = date_range(education.get_text("startDate"), education.get_text("endDate"))
    details = f"{education.get_text('institution')}  {years}"
    return f"  {typer.style(degree_area, bold=True)}  {typer.style(details, dim=True)}"


def format_certificate(certificate: Mapping) -> str:
    """Format one certificate line: name, issuer and (if given) date."""
    date = certificate.get_text("date")
    year = f"  {format_date(date)}" if date else ""
    details = f"{certificate.get_text('issuer')}{year}"
    return f"  {typer.style(certificate.get_text('name'), dim=True)}  {typer.style(details, dim=True)}"


def format_languages(languages: List[Mapping]) -> str:
    """Format all languages on one line as "Language (Fluency)"."""
    entries = []
    for language in languages:
        fluency = language.get_text("fluency").replace(FLUENCY_SUFFIX, "")
        entries.append(f"{language.get_text('language')} ({fluency})")
    return f"  {typer.style(DETAIL_SEPARATOR.join(entries), dim=True)}"


def format_stats(config: RenderConfig) -> List[str]:
    """
    Format the configured figures as two aligned columns.

    The first half of the stats fills the left column, the rest the right.
    """
    cells = [
        f"{typer.style(str(stat.value), fg='yellow', bold=True)} {stat.label}" for stat in config.stats
    ]
    split = (len(cells) + 1) // 2
    column_width = config.inner_width // 2

    lines = []
    for left, right in zip_longest(cells[:split], cells[split:], fillvalue=""):
        if not right:
            lines.append(f"  {left}")
            continue
        lines.append(f"  {left}{gap_between(left, '', column_width)}{right}")
    return lines


def format_footer(config: RenderConfig, version: str) -> List[str]:
    """Format the closing rule and the centered "<label> · v<version>" line."""
    footer = f"{config.footer_label} · v{version}"
    footer_pad = (config.inner_width - len(footer)) // 2
    return [
        horizontal_rule(config.inner_width),
        f"{' ' * footer_pad}{typer.style(footer, dim=True)}",
    ]


def render_resume(
    document: Value, config: Optional[RenderConfig] = None, version: Optional[str] = None
) -> str:
    """
    Render a parsed resume document for the terminal.

    Sections are emitted in a fixed order and skipped when empty; the header
    box and footer are always present.

    Args:
        document: Parsed document root (see module docstring for the expected shape)
        config: Render settings (defaults when None)
        version: Version shown in the footer (installed package version when None)

    Returns:
        Newline-joined, ANSI-styled text

    Example:
        from termresume.contexts.parsing import parse_document
        from termresume.contexts.rendering import render_resume

        print(render_resume(parse_document(text)))
    """
    config = config or RenderConfig()
    version = version or get_version()

    body = get_resume_body(document)
    basics = body.get_mapping("basics")
    work = body.get_sequence("work").mappings()
    skills = body.get_sequence("skills").mappings()
    education = [
        entry
        for entry in body.get_sequence("education").mappings()
        if entry.get_text("degree") not in config.skip_degrees
    ]
    certificates = body.get_sequence("certificates").mappings()
    languages = body.get_sequence("languages").mappings()

    lines: List[str] = [""]
    rendered_sections = []

    def add_section(title: str, section_lines: List[str], with_header: bool = True) -> None:
        rendered_sections.append(title)
        if with_header:
            lines.extend([section_header(title, config.inner_width), ""])
        lines.extend(section_lines)
        lines.append("")

    add_section("Header", format_header(basics, config), with_header=False)

    summary = format_summary(basics, config)
    if summary:
        add_section("Summary", summary, with_header=False)

    if work:
        entries = []
        for job in work:
            entries.extend(format_work_entry(job, config))
            entries.append("")
        # Last entry's blank line doubles as the section separator
        add_section("Experience", entries[:-1])

    if skills:
        add_section("Skills", [line for skill in skills for line in format_skill(skill, config)])

    if education:
        add_section("Education", [format_education_entry(entry) for entry in education])

    if certificates:
        add_section("Certifications", [format_certificate(cert) for cert in certificates])

    if languages:
        add_section("Languages", [format_languages(languages)], with_header=False)

    if config.stats:
        add_section("In Numbers", format_stats(config))

    lines.extend(format_footer(config, version))
    lines.append("")

    log_render_result(rendered_sections, len(lines))
    return "\n".join(indent(line, config.padding) if line else line for line in lines)
