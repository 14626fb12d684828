"""
Module: splitter.config

Purpose:
    Static section table and run configuration for the splitter.

Key Classes:
    - SectionSpec: One named section (recognizer, default range, mandatory flag)
    - SplitConfig: Settings for a split run

Key Constants:
    - SECTIONS: The fixed, ordered section table

Dependencies:
    - dataclasses (std)
    - re (std)

Used By:
    - splitter.pipeline: Iterates SECTIONS in order
    - cli / bridge: Build SplitConfig for a run
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Pattern, Tuple

from proposal_splitter.core.models import OPEN_END, PageRange


@dataclass(frozen=True)
class SectionSpec:
    """
    A named proposal section and how to find it.

    Attributes:
        name: Section identifier used in output names ("summary")
        pattern: Compiled, case-insensitive title recognizer
        default_range: Range used when no bookmark matches. Unresolved
            (start <= 0) for optional sections.
        mandatory: Whether the section must be produced. Optional
            sections are skipped when no top-level bookmark matches.
    """
    name: str
    pattern: Pattern[str]
    default_range: PageRange
    mandatory: bool = True

    def matches(self, title: str) -> bool:
        return self.pattern.search(title) is not None


SUMMARY_RE = re.compile(r"(project\s+)?summary", re.IGNORECASE)
DESCRIPTION_RE = re.compile(r"project\s+description", re.IGNORECASE)
REFERENCES_RE = re.compile(r"references(\s+cited)?", re.IGNORECASE)
DATA_MANAGEMENT_PLAN_RE = re.compile(r"data\s+management\s+plans?", re.IGNORECASE)
MENTORING_PLAN_RE = re.compile(r"mentoring\s+plans?", re.IGNORECASE)

# Extraction order matters: mandatory sections first, each run against
# the source document.
SECTIONS: Tuple[SectionSpec, ...] = (
    SectionSpec("summary", SUMMARY_RE, PageRange(1, 1)),
    SectionSpec("project-description", DESCRIPTION_RE, PageRange(2, 16)),
    SectionSpec("references", REFERENCES_RE, PageRange(17, OPEN_END)),
    SectionSpec("data-mgmt-plan", DATA_MANAGEMENT_PLAN_RE, PageRange.empty(), mandatory=False),
    SectionSpec("mentoring-plan", MENTORING_PLAN_RE, PageRange.empty(), mandatory=False),
)

DEFAULT_NAME_TEMPLATE = "submit-{name}.pdf"


def get_section(name: str) -> SectionSpec:
    """
    Look up a section by name.

    Raises:
        KeyError: If no section has that name.
    """
    for section in SECTIONS:
        if section.name == name:
            return section
    raise KeyError(f"Unknown section: {name}")


@dataclass(frozen=True)
class SplitConfig:
    """
    Configuration for a split run (immutable).

    Attributes:
        name_template: Output name format, "{name}" is the section name
        embed_outlines: Write the filtered outline into each section PDF
        sections: Ordered section table to process

    Example:
        >>> SplitConfig().output_name("summary")
        'submit-summary.pdf'
    """
    name_template: str = DEFAULT_NAME_TEMPLATE
    embed_outlines: bool = True
    sections: Tuple[SectionSpec, ...] = SECTIONS

    def __post_init__(self) -> None:
        if "{name}" not in self.name_template:
            raise ValueError(f"name_template must contain '{{name}}': {self.name_template!r}")

    def output_name(self, section_name: str) -> str:
        return self.name_template.format(name=section_name)
