from datetime import UTC, date, datetime

from src.domain.fields import (
    EPOCH,
    SUBSCRIBER_FIELDS,
    USER_FIELDS,
    AuthProvider,
    FieldSpec,
    SubscriberStatus,
    as_flag,
    as_instant,
    as_text,
    parse_instant,
    read_field,
)


def test_read_field_uses_first_present_alias():
    spec = SUBSCRIBER_FIELDS["subscribed_at"]
    assert read_field({"subscribedAt": "2024-01-01"}, spec) == "2024-01-01"
    assert read_field({"subscribed_at": "x", "subscribedAt": "y"}, spec) == "x"


def test_read_field_skips_null_and_empty():
    spec = USER_FIELDS["user"]
    assert read_field({"name": None, "display_name": "", "displayName": "Dee"}, spec) == "Dee"
    assert read_field({}, spec) == "Unknown"


def test_field_spec_keys_default_to_name():
    assert FieldSpec("email").keys == ("email",)


def test_as_text():
    assert as_text(None) == ""
    assert as_text(5) == "5"
    assert as_text("x") == "x"


def test_parse_instant_iso_with_z():
    assert parse_instant("2024-01-05T08:00:00Z") == datetime(2024, 1, 5, 8, tzinfo=UTC)


def test_parse_instant_naive_is_utc():
    assert parse_instant(datetime(2024, 1, 5)) == datetime(2024, 1, 5, tzinfo=UTC)


def test_parse_instant_date_and_epoch_seconds():
    assert parse_instant(date(2024, 1, 5)) == datetime(2024, 1, 5, tzinfo=UTC)
    assert parse_instant(0) == EPOCH


def test_parse_instant_rejects_garbage():
    assert parse_instant("not a date") is None
    assert parse_instant(None) is None
    assert parse_instant(True) is None
    assert parse_instant(["2024"]) is None


def test_as_instant_falls_back_to_epoch():
    assert as_instant(None) == EPOCH
    assert as_instant("garbage") == EPOCH


def test_as_flag():
    assert as_flag(True) is True
    assert as_flag(1) is True
    assert as_flag("yes") is True
    assert as_flag("false") is False
    assert as_flag(None) is False
    assert as_flag(0) is False


def test_tolerant_enums():
    assert SubscriberStatus.parse(" Active ") is SubscriberStatus.ACTIVE
    assert SubscriberStatus.parse("pending") is SubscriberStatus.UNKNOWN
    assert SubscriberStatus.parse(None) is SubscriberStatus.UNKNOWN
    assert AuthProvider.parse("github") is AuthProvider.UNKNOWN
