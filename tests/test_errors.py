import pytest

from sparklog.errors import (
    BuildPatternError,
    CreateDirectoryError,
    FlushBufferError,
    FormatRecordError,
    InvalidArgumentError,
    LogError,
    MultipleErrors,
    OpenFileError,
    ParseLevelError,
    QueryFileMetadataError,
    RemoveFileError,
    RenameFileError,
    SendToChannelError,
    SetLoggerNameError,
    WriteRecordError,
    push_err,
    push_result,
)
from sparklog.pattern_errors import UnknownPatternReference


def test_push_err_onto_nothing():
    first = ParseLevelError("1")
    assert push_err(None, first) is first


def test_push_err_combines_two():
    first, second = ParseLevelError("1"), ParseLevelError("2")
    combined = push_err(first, second)
    assert isinstance(combined, MultipleErrors)
    assert combined.errors == [first, second]


def test_push_err_appends_to_multiple():
    a, b, c = ParseLevelError("a"), ParseLevelError("b"), ParseLevelError("c")
    combined = push_err(push_err(a, b), c)
    assert combined.errors == [a, b, c]


def test_push_result():
    first = ParseLevelError("1")
    assert push_result(first, None) is first
    assert push_result(None, None) is None
    second = ParseLevelError("2")
    assert push_result(first, second).errors == [first, second]


@pytest.mark.parametrize(
    "cls, prefix",
    [
        (FormatRecordError, "format record error"),
        (WriteRecordError, "write record error"),
        (FlushBufferError, "flush buffer error"),
        (CreateDirectoryError, "create directory error"),
        (OpenFileError, "open file error"),
        (QueryFileMetadataError, "query file metadata error"),
        (RenameFileError, "rename file error"),
        (RemoveFileError, "remove file error"),
    ],
)
def test_wrapped_error_messages(cls, prefix):
    cause = OSError("disk gone")
    err = cls(cause)
    assert str(err) == f"{prefix}: disk gone"
    assert err.error is cause
    assert err.__cause__ is cause
    assert isinstance(err, LogError)


def test_parse_level_message():
    err = ParseLevelError("loud")
    assert str(err) == (
        "attempted to convert a string that doesn't match an existing log level: loud"
    )
    assert err.text == "loud"


def test_invalid_logger_name():
    name_err = SetLoggerNameError("a,b")
    assert name_err.name == "a,b"
    err = InvalidArgumentError("logger name", name_err)
    assert str(err) == "invalid argument 'logger name': name 'a,b' contains disallowed characters"
    assert err.__cause__ is name_err


def test_invalid_rotation_policy():
    err = InvalidArgumentError("rotation policy", "hour must be in [0, 23]")
    assert str(err) == "invalid argument 'rotation policy': hour must be in [0, 23]"


def test_send_to_channel_messages():
    full = SendToChannelError("full", dropped="flush")
    assert str(full) == "failed to send message to channel: the channel is full"
    assert full.dropped == "flush"
    gone = SendToChannelError("disconnected")
    assert str(gone) == "failed to send message to channel: the channel is disconnected"
    with pytest.raises(ValueError):
        SendToChannelError("busy")


def test_build_pattern_error():
    inner = UnknownPatternReference(is_custom=False, placeholder="x")
    err = BuildPatternError(inner)
    assert str(err) == (
        "failed to build pattern at runtime: template ill-format: no built-in pattern named 'x'"
    )
    assert err.error is inner


def test_multiple_errors_message_lists_each():
    err = MultipleErrors([ParseLevelError("a"), ParseLevelError("b")])
    text = str(err)
    assert text.count("ParseLevelError") == 2
    assert len(err.errors) == 2