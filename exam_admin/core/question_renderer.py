"""Question rendering utilities for displaying exam questions in Qt rich-text widgets."""

from __future__ import annotations

from collections.abc import Sequence

from exam_admin.core.markdown_renderer import renderer
from exam_admin.core.models import Question
from exam_admin.styling.color_palette import ColorPalette, Theme


def option_letter(index: int) -> str:
    return chr(ord("A") + index)


def render_question_card(
    question: Question,
    number: int,
    theme: Theme = Theme.LIGHT,
) -> str:
    """Render one question with its options as HTML for a ``QTextBrowser``.

    Args:
        question: The question to render
        number: 1-based position shown as the "Q<n>:" prefix
        theme: Palette used to highlight the correct option

    Returns:
        HTML fragment with the correct option highlighted and labelled
    """
    body = renderer.render_fragment(question.question)
    rows = [f"<p><b>Q{number}:</b></p>", body, "<table width='100%' cellspacing='4' cellpadding='6'>"]
    for idx, option in enumerate(question.options):
        text = renderer.render_inline(option) or "(empty)"
        if idx == question.correct_answer:
            rows.append(
                f"<tr><td style='background-color: {ColorPalette.CORRECT_OPTION_BG.get(theme)};"
                f" color: {ColorPalette.SUCCESS.get(theme)};'>"
                f"<b>{option_letter(idx)}.</b> {text} <i>(Correct)</i></td></tr>"
            )
        else:
            rows.append(f"<tr><td><b>{option_letter(idx)}.</b> {text}</td></tr>")
    rows.append("</table>")
    return "\n".join(rows)


def render_question_list(questions: Sequence[Question], theme: Theme = Theme.LIGHT) -> str:
    """Render a whole question set into one document, e.g. for the exam preview."""
    if not questions:
        return "<p><em>No questions.</em></p>"
    return "<hr/>".join(
        render_question_card(question, number, theme)
        for number, question in enumerate(questions, start=1)
    )
