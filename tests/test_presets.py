"""Tests for notification presets."""

from peptrack.notifications import presets


def test_dose_reminder_with_amount() -> None:
    payload = presets.dose_reminder("s1", "BPC-157", "09:00", 2.5)
    assert payload.title == "Dose Reminder"
    assert payload.body == "Time for your BPC-157 dose (2.5mg) - scheduled for 09:00"
    assert payload.tag == "dose-reminder-s1"
    assert payload.severity == "info"
    assert payload.toast_only is False


def test_dose_reminder_whole_amount_has_no_decimal() -> None:
    payload = presets.dose_reminder("s2", "TB-500", "21:00", 3.0)
    assert "(3mg)" in payload.body


def test_dose_reminder_without_amount() -> None:
    payload = presets.dose_reminder("s1", "BPC-157", "09:00")
    assert payload.body == "Time for your BPC-157 dose - scheduled for 09:00"


def test_dose_reminder_zero_amount_omitted() -> None:
    payload = presets.dose_reminder("s1", "BPC-157", "09:00", 0)
    assert "mg" not in payload.body


def test_backup_presets() -> None:
    assert presets.backup_success().severity == "success"
    failed = presets.backup_failed("disk full")
    assert failed.body == "Backup failed: disk full"
    assert failed.severity == "error"


def test_vial_expiring_pluralizes() -> None:
    assert presets.vial_expiring("BPC-157", 1).body == "Your BPC-157 vial expires in 1 day"
    assert presets.vial_expiring("BPC-157", 3).body == "Your BPC-157 vial expires in 3 days"


def test_low_stock() -> None:
    payload = presets.low_stock("TB-500", 1.5)
    assert payload.body == "Only 1.5mg of TB-500 remaining"
    assert payload.severity == "warning"


def test_price_change() -> None:
    assert presets.price_change("BPC-157", "dropped 10%").body == "BPC-157 price dropped 10%"
