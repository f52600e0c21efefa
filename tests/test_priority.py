from tasks.priority import (
    DEFAULT_TASK_PRIORITY,
    TaskPriority,
    detect_priorities_in_text,
    is_high_priority,
    is_low_priority,
    priority_from_number,
    priority_label,
    priority_short_label,
)


class TestPriorityHelpers:
    def test_labels(self):
        assert priority_label(1) == "Critical"
        assert priority_label(5) == "Very Low"
        assert priority_short_label(3) == "P3"

    def test_default_is_high(self):
        assert DEFAULT_TASK_PRIORITY == TaskPriority.HIGH

    def test_from_number_falls_back(self):
        assert priority_from_number("4") == TaskPriority.LOW
        assert priority_from_number(9) == DEFAULT_TASK_PRIORITY
        assert priority_from_number(None) == DEFAULT_TASK_PRIORITY

    def test_high_low(self):
        assert is_high_priority(TaskPriority.CRITICAL)
        assert not is_high_priority(TaskPriority.MEDIUM)
        assert is_low_priority(TaskPriority.VERY_LOW)


class TestDetectPriorities:
    def test_no_marker(self):
        result = detect_priorities_in_text("Write the report")
        assert result.detected == []
        assert result.priority is None
        assert result.cleaned_text == "Write the report"

    def test_label_marker(self):
        result = detect_priorities_in_text("Fix login !critical now")
        assert result.priority == TaskPriority.CRITICAL
        assert result.cleaned_text == "Fix login now"
        marker = result.detected[0]
        assert (marker.original_text, marker.start, marker.end) == ("!critical", 10, 19)

    def test_short_marker_case_insensitive(self):
        result = detect_priorities_in_text("Refactor !P4")
        assert result.priority == TaskPriority.LOW
        assert result.cleaned_text == "Refactor"

    def test_last_marker_wins(self):
        result = detect_priorities_in_text("!low tidy up !high")
        assert len(result.detected) == 2
        assert result.priority == TaskPriority.HIGH
        assert result.cleaned_text == "tidy up"

    def test_ignored_sections(self):
        text = "Document `!p1` flag"
        start = text.index("`")
        result = detect_priorities_in_text(text, ignore_sections=[(start, start + 5)])
        assert result.detected == []
        assert result.cleaned_text == text
