#!/usr/bin/env python3
"""Basic usage example for drone-advisor.

This example shows how to check flight conditions with the
default Buenos Aires location.
"""

from drone_advisor import FlightAdvisor


def main():
    # Create an advisor with default location (Buenos Aires)
    advisor = FlightAdvisor()

    # Display the report for the first forecast hour
    print("Running flight advisor...")
    verdict = advisor.run()

    # You can also access the verdict programmatically
    print("\n" + "=" * 50)
    print("Programmatic Access Example")
    print("=" * 50)

    print(f"\nSafe to fly: {verdict.safe}")
    for message in verdict.danger_messages:
        print(f"  DANGER: {message}")
    for message in verdict.warning_messages:
        print(f"  WARNING: {message}")

    # Check another hour without reloading data
    sample, later = advisor.evaluate_hour(12)
    print(f"\nAt {advisor.hour_label(12)}: {sample.wind} km/h wind, safe={later.safe}")


if __name__ == "__main__":
    main()
