from __future__ import annotations

from pathlib import Path

SAMPLE_TEXT = (
    "The system was designed by our team. "
    "It should be noted that the results will be evaluated."
)
SAMPLE_EDITED = "Our team designed the system. The results are evaluated."

VALID_INTRODUCTION = (
    "Scheduling jobs across clusters remains a difficult problem. "
    "Unlike existing schedulers, we propose a novel approach.\n\n"
    "Our main contribution is a placement algorithm."
)

ABSTRACT_SENTENCE = "The problem is solved by our method with good results."


def make_abstract(sentences: int) -> str:
    """Ten words per sentence, covering problem, approach and result terms."""
    return " ".join([ABSTRACT_SENTENCE] * sentences)


def write_paper(path: Path, sections: dict[str, str]) -> Path:
    """Write a Markdown paper with one ``#`` heading per section."""
    body = "\n\n".join(f"# {title}\n{content}" for title, content in sections.items())
    path.write_text(body, encoding="utf-8")
    return path
