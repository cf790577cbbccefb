#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2typ/utils/metadata.py

"""Report metadata read from YAML front matter.

The front matter of a report carries the fields used to build the Typst
header: title, course, date, authors, bibliography file and whether a table
of contents is wanted. The parser stores the raw mapping on the Document;
this module turns it into typed containers for the header template.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, List, Mapping, Optional


def _as_text(value: Any) -> str:
    """Render a scalar front matter value as text, mapping None to empty."""
    if value is None:
        return ""
    if isinstance(value, datetime):
        return value.strftime("%Y-%m-%d %H:%M:%S")
    if isinstance(value, date):
        return value.strftime("%Y-%m-%d")
    return str(value)


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"true", "yes", "on", "1"}
    return bool(value)


@dataclass(frozen=True)
class Author:
    """One report author.

    Parameters
    ----------
    name : str
        Author name, emitted as a Typst string
    department : str
        Department, emitted as Typst content
    organization : str
        Organization, emitted as Typst content
    email : str
        E-mail address, emitted as a Typst string

    """

    name: str = ""
    department: str = ""
    organization: str = ""
    email: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Author":
        """Build an author from a front matter mapping, ignoring unknown keys."""
        return cls(
            name=_as_text(data.get("name")),
            department=_as_text(data.get("department")),
            organization=_as_text(data.get("organization")),
            email=_as_text(data.get("email")),
        )


@dataclass(frozen=True)
class ReportMetadata:
    """Container for the report header fields.

    Parameters
    ----------
    title : str
        Report title
    course : str
        Course name
    date : str
        Report date as written (YAML dates are rendered as ISO text)
    authors : list[Author]
        Report authors, in order
    bibliography : str
        Path of the bibliography file
    toc : bool
        Whether to emit an outline and page break after the header

    """

    title: str = ""
    course: str = ""
    date: str = ""
    authors: List[Author] = field(default_factory=list)
    bibliography: str = ""
    toc: bool = False

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "ReportMetadata":
        """Build report metadata from a parsed front matter mapping.

        Parameters
        ----------
        data : Mapping or None
            Result of ``yaml.safe_load`` on the front matter block

        Returns
        -------
        ReportMetadata
            Metadata with unknown keys ignored and missing keys empty

        """
        if not data:
            return cls()

        raw_authors = data.get("authors") or []
        if isinstance(raw_authors, Mapping):
            raw_authors = [raw_authors]
        authors = [Author.from_dict(item) for item in raw_authors if isinstance(item, Mapping)]

        return cls(
            title=_as_text(data.get("title")),
            course=_as_text(data.get("course")),
            date=_as_text(data.get("date")),
            authors=authors,
            bibliography=_as_text(data.get("bibliography")),
            toc=_as_bool(data.get("toc", False)),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert metadata to a flat mapping for template rendering.

        Returns
        -------
        dict
            All fields, with authors expanded into plain dictionaries

        """
        return {
            "title": self.title,
            "course": self.course,
            "date": self.date,
            "authors": [
                {
                    "name": author.name,
                    "department": author.department,
                    "organization": author.organization,
                    "email": author.email,
                }
                for author in self.authors
            ],
            "bibliography": self.bibliography,
            "toc": self.toc,
        }


__all__ = ["Author", "ReportMetadata"]
