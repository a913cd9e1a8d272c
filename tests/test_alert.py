from PySide6.QtTest import QTest

from passgen_app.core.alert import AlertState


def test_default_timeout_is_three_seconds(qapp):
    alert = AlertState()
    assert alert.timeout_ms == 3000
    assert not alert.visible
    assert alert.message == ""


def test_raise_shows_immediately(qapp):
    alert = AlertState(timeout_ms=50)
    seen = []
    alert.changed.connect(lambda visible, message: seen.append((visible, message)))

    alert.raise_alert("Select something")

    assert alert.visible
    assert alert.message == "Select something"
    assert alert.is_pending()
    assert seen == [(True, "Select something")]


def test_hides_after_timeout_and_keeps_message(qapp):
    alert = AlertState(timeout_ms=50)
    seen = []
    alert.changed.connect(lambda visible, message: seen.append((visible, message)))

    alert.raise_alert("Select something")
    QTest.qWait(300)

    assert not alert.visible
    assert alert.message == "Select something"
    assert not alert.is_pending()
    assert seen == [(True, "Select something"), (False, "Select something")]


def test_second_raise_restarts_the_hide_timer(qapp):
    alert = AlertState(timeout_ms=400)
    alert.raise_alert("first")
    QTest.qWait(250)
    alert.raise_alert("second")
    QTest.qWait(250)

    # The first raise would have expired by now
    assert alert.visible
    assert alert.message == "second"

    QTest.qWait(500)
    assert not alert.visible
    assert alert.message == "second"


def test_hide_cancels_pending_timer(qapp):
    alert = AlertState(timeout_ms=1000)
    alert.raise_alert("boom")
    alert.hide()
    assert not alert.visible
    assert not alert.is_pending()


def test_hide_when_idle_emits_nothing(qapp):
    alert = AlertState(timeout_ms=50)
    seen = []
    alert.changed.connect(lambda *args: seen.append(args))
    alert.hide()
    assert seen == []
