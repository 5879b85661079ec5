"""Change notifications for project finance records; observers refresh their views."""
from core.events.signal import Signal


class DomainEvents:
    def __init__(self) -> None:
        self.project_changed: Signal[str] = Signal()   # project_id
        self.staff_changed: Signal[str] = Signal()     # project_id
        self.budget_changed: Signal[str] = Signal()    # project_id
        self.actuals_changed: Signal[str] = Signal()   # project_id
        self.payments_changed: Signal[str] = Signal()  # project_id

    def all_signals(self) -> list[Signal[str]]:
        return [
            self.project_changed,
            self.staff_changed,
            self.budget_changed,
            self.actuals_changed,
            self.payments_changed,
        ]

    def connect_all(self, callback) -> None:
        """Subscribe one refresh callback to every finance-affecting change."""
        for signal in self.all_signals():
            signal.connect(callback)

    def disconnect_all(self, callback) -> None:
        for signal in self.all_signals():
            signal.disconnect(callback)


# SINGLE global instance
domain_events = DomainEvents()
