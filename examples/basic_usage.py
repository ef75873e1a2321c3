"""Basic usage examples for paxcalc."""

from paxcalc import (
    SOLO_2024,
    active_classes,
    convert,
    find_class,
    format_difference,
    format_time,
    parse_time,
    validate,
)


def main() -> None:
    # Check the embedded index before trusting it
    print("=== Solo 2024 index ===")
    report = validate(SOLO_2024)
    print(f"  valid={report.is_valid} groups={report.group_count} classes={report.class_count}")
    for warning in report.warnings:
        print(f"  warning: {warning}")

    # Convert a Super Street run into every active class
    ss = find_class("SS", SOLO_2024)
    if ss is None:
        print("  SS not found.")
        return

    run = parse_time("1:05.123")
    print(f"\n=== {format_time(run)}s in {ss.code} ({ss.name}) ===")
    for target in active_classes(SOLO_2024):
        result = convert(run, ss, target)
        print(
            f"  {target.code:<6} {format_time(result.output_time):>9}"
            f"  {format_difference(result.time_difference):>8}",
        )


if __name__ == "__main__":
    main()
