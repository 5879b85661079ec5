import weakref

from core.events.domain_events import domain_events
from core.events.signal import Signal


def test_domain_event_signal_connect_emit_disconnect():
    seen: list[str] = []

    def _handler(project_id: str) -> None:
        seen.append(project_id)

    domain_events.project_changed.connect(_handler)
    domain_events.project_changed.emit("p-1")
    domain_events.project_changed.disconnect(_handler)
    domain_events.project_changed.emit("p-2")

    assert seen == ["p-1"]


def test_signal_emit_prunes_dead_weak_callbacks():
    signal: Signal[str] = Signal()
    seen: list[str] = []

    class _View:
        def refresh(self, payload: str) -> None:
            seen.append(payload)

    view = _View()
    proxy = weakref.proxy(view)
    signal.connect(lambda payload: proxy.refresh(payload))
    signal.emit("p-1")
    del view
    signal.emit("p-2")

    assert seen == ["p-1"]
    assert signal.subscriber_count == 0


def test_signal_emit_keeps_handler_errors_visible():
    signal: Signal[str] = Signal()

    def _boom(_payload: str) -> None:
        raise RuntimeError("boom")

    signal.connect(_boom)

    try:
        signal.emit("x")
        assert False, "Expected RuntimeError to propagate"
    except RuntimeError as exc:
        assert str(exc) == "boom"


def test_services_emit_change_events_after_commit(services, project):
    seen: list[tuple[str, str]] = []

    def _make(name):
        return lambda project_id: seen.append((name, project_id))

    handlers = {
        "staff": _make("staff"),
        "budget": _make("budget"),
        "actuals": _make("actuals"),
        "payments": _make("payments"),
        "project": _make("project"),
    }
    domain_events.staff_changed.connect(handlers["staff"])
    domain_events.budget_changed.connect(handlers["budget"])
    domain_events.actuals_changed.connect(handlers["actuals"])
    domain_events.payments_changed.connect(handlers["payments"])
    domain_events.project_changed.connect(handlers["project"])
    try:
        staff = services["staff_service"].add_staff(project.id, "Ali", "100")
        services["budget_service"].add_labor_line(project.id, staff.id, "5")
        services["actuals_service"].add_expense(project.id, "20")
        services["payment_service"].add_payment(project.id, "Advance", "10", "2026-01-02")
        services["project_service"].set_progress(project.id, "10")
    finally:
        domain_events.staff_changed.disconnect(handlers["staff"])
        domain_events.budget_changed.disconnect(handlers["budget"])
        domain_events.actuals_changed.disconnect(handlers["actuals"])
        domain_events.payments_changed.disconnect(handlers["payments"])
        domain_events.project_changed.disconnect(handlers["project"])

    assert seen == [
        ("staff", project.id),
        ("budget", project.id),
        ("actuals", project.id),
        ("payments", project.id),
        ("project", project.id),
    ]


def test_connect_all_receives_every_change(services, project):
    seen: list[str] = []

    def _refresh(project_id: str) -> None:
        seen.append(project_id)

    domain_events.connect_all(_refresh)
    try:
        services["staff_service"].add_staff(project.id, "Ali", "100")
        services["payment_service"].add_payment(project.id, "Advance", "10", "2026-01-02")
    finally:
        domain_events.disconnect_all(_refresh)

    assert seen == [project.id, project.id]
