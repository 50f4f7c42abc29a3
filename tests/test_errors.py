"""Tests for the outcome types and error messages."""

from meshkit import ErrorCode, MeshLoadError, ParseOutcome, WriteOutcome, format_error


class TestOutcome:

    def test_success_is_falsy(self):
        outcome = ParseOutcome()
        assert not outcome
        assert outcome.ok
        assert outcome == ErrorCode.NONE
        assert outcome.message == "None"

    def test_failure_is_truthy(self):
        outcome = WriteOutcome(ErrorCode.FILE_ALREADY_EXISTS)
        assert outcome
        assert not outcome.ok
        assert outcome == ErrorCode.FILE_ALREADY_EXISTS
        assert outcome != ErrorCode.NONE
        assert outcome.message == "The specified file already exists"

    def test_equality_between_outcomes(self):
        assert ParseOutcome(ErrorCode.INVALID_DATA) == ParseOutcome(ErrorCode.INVALID_DATA)
        assert ParseOutcome(ErrorCode.INVALID_DATA) != ParseOutcome(ErrorCode.FILE_NOT_FOUND)

    def test_every_code_has_a_message(self):
        for code in ErrorCode:
            assert format_error(code)

    def test_load_error_message(self):
        err = MeshLoadError(ErrorCode.FILE_NOT_FOUND)
        assert err.code is ErrorCode.FILE_NOT_FOUND
        assert str(err) == "Failed to load mesh: The file or directory does not exist"
