"""Basic usage of the fuel stint schedule."""

from datetime import datetime, timedelta, timezone

from stint_planner import (
    STANDARD_WITH_TIRES,
    Driver,
    EventConfig,
    FuelStintConfig,
    FuelStintSchedule,
    StintProfile,
    StintProfiles,
)
from stint_planner.formatters import (
    DurationFormat,
    format_duration,
    format_stint_type,
    format_wall_clock,
)


def print_schedule(schedule: FuelStintSchedule) -> None:
    for row in schedule.rows:
        driver = row.driver_id if row.driver_id is not None else "-"
        print(
            f"  #{row.fuel_stint_number:<2} {format_stint_type(row.stint_type):<13}"
            f" {format_wall_clock(row.utc_start):>8} - {format_wall_clock(row.actual_end):>8}"
            f"  laps {row.calculated_laps:>2}"
            f"  delta {format_duration(row.duration_delta)}"
            f"  driver {driver} (stint {row.stint_number})"
        )


def main() -> None:
    event_config = EventConfig.from_session_start(
        session_start_utc=datetime(2021, 10, 2, 12, 0, tzinfo=timezone.utc),
        green_flag_offset=timedelta(minutes=43),
        race_duration=timedelta(hours=6),
        race_start_tod=datetime(2021, 10, 2, 11, 0),
    )
    fuel_config = FuelStintConfig(
        pit_duration=timedelta(seconds=55),
        fuel_tank_size=100,
        tire_change_time=timedelta(seconds=25),
    )
    profiles = StintProfiles(
        standard=StintProfile.derive(timedelta(seconds=98.2), 3.4, 100, fuel_config.pit_duration),
        fuel_saving=StintProfile.derive(timedelta(seconds=99.1), 3.1, 100, fuel_config.pit_duration),
    )
    drivers = [
        Driver(id=1, name="Alex", stint_preference=2),
        Driver(id=2, name="Sam", stint_preference=1),
    ]

    schedule = FuelStintSchedule(event_config, fuel_config, profiles, drivers)
    print(f"=== Initial schedule ({len(schedule)} stints) ===")
    print_schedule(schedule)

    schedule.update_driver(0, 1)
    schedule.update_driver(1, 1)
    schedule.update_driver(2, 2)
    schedule.update_actual_end_time(0, "1:43 PM")
    schedule.update_stint_type(3, STANDARD_WITH_TIRES)
    schedule.update_damage_modifier(4, timedelta(seconds=1.5))

    print(f"\n=== After edits ({len(schedule)} stints) ===")
    print_schedule(schedule)

    last = schedule.rows[-1]
    print(f"\nLast stint: {format_duration(last.duration, DurationFormat.HOUR_MIN_SEC)}")


if __name__ == "__main__":
    main()
