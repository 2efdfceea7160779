"""Gearbox -- a car transmission driven by ignition and shift events.

Demonstrates:
- Registering transitions per event with ``when``
- Entry callbacks with ``on`` and every-transition callbacks with ``any``
- Passing a payload through ``trigger``
- Checking the boolean result of a rejected event

Run: python -m examples.gearbox
"""

from typing import Any

from eventfsm import StateMachine


def build_gearbox() -> StateMachine:
    car = StateMachine("off")
    car.when("ignition", {"off": "park"})
    car.when("shift_up", {"park": "reverse", "reverse": "neutral", "neutral": "drive"})
    car.when("shift_down", {"drive": "neutral", "neutral": "reverse", "reverse": "park"})
    return car


def main() -> None:
    print("=== Gearbox ===\n")
    car = build_gearbox()

    def on_drive(machine: StateMachine, data: Any) -> None:
        print(f"  {data or 'Someone'} is driving")

    def show(machine: StateMachine, data: Any) -> None:
        print(f"  gear: {machine.state}")

    car.on("drive", on_drive)
    car.any(show)

    car.trigger("ignition")
    car.trigger("shift_up")
    car.trigger("shift_up")
    car.trigger("shift_up", "Jack")

    # No gear above drive; the event is rejected and the state stays put.
    if not car.trigger("shift_up"):
        print(f"  cannot shift up from {car.state}")

    car.trigger("shift_down")

    print()
    print(car.describe())


if __name__ == "__main__":
    main()
