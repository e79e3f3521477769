"""Tests for the smaller window widgets."""

from class_registration.core.models.catalog import ClassOption
from class_registration.core.models.fields import FieldSlot, RoundGroup
from class_registration.core.models.outcome import SubmissionOutcome
from class_registration.gui.styles.theme import Styles
from class_registration.gui.widgets.console_widget import ConsoleWidget
from class_registration.gui.widgets.details_card import DetailsCard
from class_registration.gui.widgets.round_card import RoundCard
from class_registration.gui.widgets.status_banner import StatusBanner


def round_one():
    return RoundGroup(1, (FieldSlot.for_position(1, 0), FieldSlot.for_position(1, 1)))


class TestRoundCard:
    def test_inputs_per_slot(self, qtbot):
        card = RoundCard(round_one())
        qtbot.addWidget(card)

        assert list(card.inputs) == ["round1_student1_name", "round1_student2_name"]
        assert card.title_label.text() == "Round 1 - 2 Students"
        assert card.input_for("round1_student1_name").placeholderText() == "Enter name"

    def test_typing_emits_value_edited(self, qtbot):
        card = RoundCard(round_one())
        qtbot.addWidget(card)

        with qtbot.waitSignal(card.value_edited, timeout=1000) as blocker:
            qtbot.keyClicks(card.input_for("round1_student2_name"), "B")

        assert blocker.args == ["round1_student2_name", "B"]

    def test_invalid_highlight_cleared_on_edit(self, qtbot):
        card = RoundCard(round_one())
        qtbot.addWidget(card)
        edit = card.input_for("round1_student1_name")

        card.set_invalid("round1_student1_name", True)
        assert edit.styleSheet() == Styles.INPUT_FIELD_INVALID

        qtbot.keyClicks(edit, "A")
        assert edit.styleSheet() == ""

    def test_unknown_key_ignored(self, qtbot):
        card = RoundCard(round_one())
        qtbot.addWidget(card)
        card.set_invalid("round9_student1_name", True)
        assert card.input_for("round9_student1_name") is None


class TestStatusBanner:
    def test_hidden_initially(self, qtbot):
        banner = StatusBanner()
        qtbot.addWidget(banner)
        assert banner.isHidden()
        assert banner.kind is None

    def test_success_outcome(self, qtbot):
        banner = StatusBanner()
        qtbot.addWidget(banner)
        banner.show_outcome(SubmissionOutcome.success("Registration submitted for Class 2."))

        assert not banner.isHidden()
        assert banner.kind == "success"
        assert banner.styleSheet() == Styles.BANNER_SUCCESS
        assert banner.message() == "Registration submitted for Class 2."

    def test_error_then_clear(self, qtbot):
        banner = StatusBanner()
        qtbot.addWidget(banner)
        banner.show_outcome(SubmissionOutcome.error("Error: boom"))
        assert banner.kind == "error"
        assert banner.styleSheet() == Styles.BANNER_ERROR

        banner.clear()
        assert banner.isHidden()
        assert banner.message() == ""


class TestDetailsCard:
    def test_shows_selected_class(self, qtbot):
        card = DetailsCard()
        qtbot.addWidget(card)
        card.update_details(ClassOption(4, "Class 4"), "Program Name", 10)

        assert not card.isHidden()
        assert card.summary_label.text() == "Class 4 - Program Name"
        assert card.count_label.text() == "10"

    def test_hidden_without_class(self, qtbot):
        card = DetailsCard()
        qtbot.addWidget(card)
        card.update_details(ClassOption(4, "Class 4"), "Program Name", 10)
        card.update_details(None, "Program Name", 0)
        assert card.isHidden()


class TestConsoleWidget:
    def test_append_log(self, qtbot):
        console = ConsoleWidget()
        qtbot.addWidget(console)
        console.append_log("WARNING", "Submission failed")

        assert "[WARNING] Submission failed" in console.plain_text()

    def test_suppressed_level(self, qtbot):
        console = ConsoleWidget()
        qtbot.addWidget(console)
        console.suppressed_levels = {"info"}
        console.append_log("INFO", "hidden")
        assert "hidden" not in console.plain_text()

    def test_clear(self, qtbot):
        console = ConsoleWidget()
        qtbot.addWidget(console)
        console.append_log("ERROR", "boom")
        console.clear()
        assert console.plain_text() == ""
