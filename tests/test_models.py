import pytest

from exam_admin.core.models import (
    DraftForm,
    ExamResponse,
    Question,
    ScoreTier,
    classify_score,
    format_submitted_at,
)


class TestClassifyScore:
    @pytest.mark.parametrize(
        "score,total,expected",
        [
            (7, 10, ScoreTier.HIGH),
            (10, 10, ScoreTier.HIGH),
            (6, 10, ScoreTier.MEDIUM),
            (4, 10, ScoreTier.MEDIUM),
            (3, 10, ScoreTier.LOW),
            (0, 10, ScoreTier.LOW),
        ],
    )
    def test_tiers_for_ten_questions(self, score, total, expected):
        assert classify_score(score, total) is expected

    def test_lower_bounds_are_inclusive_when_not_whole_numbers(self):
        # 0.7 * 3 = 2.1 and 0.4 * 3 = 1.2
        assert classify_score(2, 3) is ScoreTier.MEDIUM
        assert classify_score(3, 3) is ScoreTier.HIGH
        assert classify_score(1, 3) is ScoreTier.LOW

    def test_exact_seventy_percent_of_twenty(self):
        assert classify_score(14, 20) is ScoreTier.HIGH
        assert classify_score(13, 20) is ScoreTier.MEDIUM
        assert classify_score(8, 20) is ScoreTier.MEDIUM
        assert classify_score(7, 20) is ScoreTier.LOW

    def test_zero_total_is_rejected(self):
        with pytest.raises(ValueError):
            classify_score(0, 0)


class TestQuestion:
    def test_requires_four_options(self):
        with pytest.raises(ValueError):
            Question(id=1, question="Q", options=("a", "b", "c"), correct_answer=0)

    def test_correct_answer_must_reference_an_option(self):
        with pytest.raises(ValueError):
            Question(id=1, question="Q", options=("a", "b", "c", "d"), correct_answer=4)


def test_exam_response_tier_and_label():
    response = ExamResponse(
        id=1,
        roll_number="21CS001",
        name="Asha",
        department="CSE",
        section="A",
        score=4,
        total_questions=10,
        was_tab_switched=True,
        submitted_at="2024-03-01T10:00:00Z",
    )
    assert response.tier is ScoreTier.MEDIUM
    assert response.score_label == "4/10"


class TestExamResponseValidation:
    def make(self, **overrides):
        fields = dict(
            id=1,
            roll_number="21CS001",
            name="Asha",
            department="CSE",
            section="A",
            score=4,
            total_questions=10,
            was_tab_switched=False,
            submitted_at="2024-03-01T10:00:00Z",
        )
        fields.update(overrides)
        return ExamResponse(**fields)

    def test_full_marks_are_allowed(self):
        assert self.make(score=10).tier is ScoreTier.HIGH

    @pytest.mark.parametrize("score", [11, 15, -1])
    def test_score_outside_total_is_rejected(self, score):
        with pytest.raises(ValueError):
            self.make(score=score)

    def test_zero_total_is_rejected(self):
        with pytest.raises(ValueError):
            self.make(score=0, total_questions=0)


class TestDraftForm:
    def test_defaults(self):
        draft = DraftForm()
        assert draft.question == ""
        assert draft.options == ["", "", "", ""]
        assert draft.correct_answer == 0
        assert not draft.is_complete()

    def test_from_question_copies_fields(self, sample_questions):
        draft = DraftForm.from_question(sample_questions[2])
        assert draft.question == "Largest planet?"
        assert draft.options == ["Mars", "Venus", "Jupiter", "Earth"]
        assert draft.correct_answer == 2
        assert draft.is_complete()

    def test_whitespace_only_option_is_incomplete(self):
        draft = DraftForm(question="Q", options=["a", "b", "  ", "d"])
        assert not draft.is_complete()

    def test_select_correct_is_single_choice(self):
        draft = DraftForm()
        draft.select_correct(3)
        draft.select_correct(1)
        assert draft.correct_answer == 1

    def test_select_correct_rejects_out_of_range(self):
        draft = DraftForm()
        with pytest.raises(ValueError):
            draft.select_correct(4)
        assert draft.correct_answer == 0

    def test_set_option_rejects_out_of_range(self):
        with pytest.raises(IndexError):
            DraftForm().set_option(4, "x")

    def test_reset(self):
        draft = DraftForm(question="Q", options=["a", "b", "c", "d"], correct_answer=3)
        draft.reset()
        assert draft == DraftForm()

    def test_payload_shape(self):
        draft = DraftForm(question="Q", options=["a", "b", "c", "d"], correct_answer=2)
        assert draft.to_payload() == {
            "question": "Q",
            "options": ["a", "b", "c", "d"],
            "correct_answer": 2,
        }


def test_format_submitted_at_accepts_trailing_z():
    rendered = format_submitted_at("2024-03-01T10:00:00Z")
    assert rendered != "2024-03-01T10:00:00Z"
    assert "2024" in rendered


def test_format_submitted_at_returns_garbage_unchanged():
    assert format_submitted_at("yesterday") == "yesterday"
