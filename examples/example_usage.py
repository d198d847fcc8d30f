"""Example: drive the service layer directly (no Flask).

Controllers are a thin layer; the time accounting lives in the services.
"""

from datetime import datetime

from src.hours_ledger.hours_ledger.container import LedgerConfig, build_container
from src.hours_ledger.hours_ledger.core.enums import Direction
from src.hours_ledger.hours_ledger.events import FormSubmission, PeriodicTick


def main():
    container = build_container(config=LedgerConfig(store_backend="memory"))
    dispatcher = container.dispatcher

    dispatcher.dispatch(FormSubmission(datetime(2025, 3, 3, 15, 0), "member@example.org", Direction.IN))
    dispatcher.dispatch(FormSubmission(datetime(2025, 3, 3, 16, 30), "member@example.org", Direction.OUT, "Wiring"))
    dispatcher.dispatch(FormSubmission(datetime(2025, 3, 4, 15, 0), "member@example.org", Direction.IN))
    print(dispatcher.dispatch(PeriodicTick(now=datetime(2025, 3, 4, 18, 0))))

    for line in container.store.snapshot():
        print(line)


if __name__ == "__main__":
    main()
