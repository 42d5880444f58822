"""Minimal example showing how to edit a short paper and inspect its changes."""

from __future__ import annotations

from writing_editor.config import EditorConfig
from writing_editor.operations import edit_document


def main() -> None:
    config = EditorConfig(save_reports=False)

    sample_text = (
        "# Introduction\n"
        "In today's world, clusters run many jobs. "
        "The scheduler was designed by our team.\n\n"
        "# Evaluation\n"
        "It should be noted that the results will be evaluated (see appendix)."
    )
    result = edit_document(sample_text, "full_paper", "both", config)
    print("Original:\n", sample_text)
    print("\nEdited:\n", result.edited)
    print("\nSuggestions:")
    for suggestion in result.suggestions:
        print(" -", suggestion)


if __name__ == "__main__":
    main()
