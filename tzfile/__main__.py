import logging
import sys

from .tzfile import TZFile

DEFAULT_TIMEZONE_NAME = "UTC"


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    verbose = "-v" in args
    names = [arg for arg in args if arg != "-v"]
    timezone_name = names[0] if names else DEFAULT_TIMEZONE_NAME

    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)

    try:
        tz_file = TZFile.read(timezone_name)
    except (OSError, ValueError) as exc:
        print(f"{timezone_name}: {exc}", file=sys.stderr)
        return 1

    data = tz_file.data
    print(f"{tz_file.timezone_name} ({tz_file.filepath})")
    print(tz_file.header)
    for transition_time, type_index in zip(
        data.transition_times, data.transition_indices
    ):
        print(f"  {transition_time.isoformat()}  type={type_index}")
    for index, transition_type in enumerate(data.transition_types):
        print(f"  [{index}] {transition_type}")
    print(f"  abbreviations: {data.abbreviations}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
