#!/usr/bin/env python3
"""Example using a custom location and the evaluation engine directly.

Shows how to evaluate any location, and how to run the evaluator on
your own numbers without any network access.
"""

from drone_advisor import (
    DJI_MINI_2,
    FlightAdvisor,
    GeomagneticReading,
    HourlySample,
    Location,
    evaluate,
    search_places,
)


def main():
    # Define a custom location (Bariloche)
    bariloche = Location(name="Bariloche", latitude=-41.1335, longitude=-71.3103)

    # Or look one up
    for place in search_places("Mendoza"):
        print(f"{place.name} ({place.region}): {place.latitude}, {place.longitude}")
    print()

    # Hour-by-hour outlook for the custom location
    advisor = FlightAdvisor(location=bariloche)
    advisor.run_outlook(hours=12)

    # Evaluate your own measurements
    sample = HourlySample(temp=3, wind=24, gusts=30, clouds=80, rain=10, visibility=4.5)
    verdict = evaluate(sample, GeomagneticReading.from_value(4.7), DJI_MINI_2)

    print(f"Safe: {verdict.safe}")
    for detail in verdict.details:
        print(f"  [{detail.severity.value}] {detail.title}: {detail.message}")


if __name__ == "__main__":
    main()
