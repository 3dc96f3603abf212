import logging
import os
from importlib import resources
from typing import IO

from .tzif_body import TimezoneData
from .tzif_header import TZifHeader

_LOGGER = logging.getLogger(__name__)

TZFILES_DIR_ENV = "TZFILES_DIR"


def parse_header(buffer: bytes) -> TZifHeader:
    return TZifHeader.parse(buffer)


def parse(header: TZifHeader, buffer: bytes) -> TimezoneData:
    return TimezoneData.parse(header, buffer)


def read_tzfile(timezone_name: str) -> bytes:
    return TZFile.read_bytes(timezone_name)


class TZFile:
    def __init__(
        self,
        timezone_name: str,
        filepath: str | None,
        header: TZifHeader,
        data: TimezoneData,
    ) -> None:
        self.timezone_name = timezone_name
        self.filepath = filepath
        self.header = header
        self.data = data

    @property
    def version(self) -> int:
        return self.header.version

    @classmethod
    def from_bytes(
        cls, buffer: bytes, timezone_name: str, filepath: str | None = None
    ) -> "TZFile":
        header = parse_header(buffer)
        return cls(timezone_name, filepath, header, parse(header, buffer))

    @classmethod
    def from_path(cls, path: str, timezone_name: str | None = None) -> "TZFile":
        """Read a TZif file directly from a filesystem path."""
        real = os.path.realpath(path)
        with open(real, "rb") as file:
            buffer = file.read()
        return cls.from_bytes(buffer, timezone_name or real, real)

    @classmethod
    def read(cls, timezone_name: str) -> "TZFile":
        filepath, buffer = cls._read_zone(timezone_name)
        return cls.from_bytes(buffer, timezone_name, filepath)

    @classmethod
    def read_bytes(cls, timezone_name: str) -> bytes:
        """
        Raw contents of the zone file for `timezone_name`.

        The file is looked up under `TZFILES_DIR` when set, else under the
        platform default directory. If it is not there, the zone files bundled
        with the tzdata package are tried.
        """
        return cls._read_zone(timezone_name)[1]

    @classmethod
    def _read_zone(cls, timezone_name: str) -> tuple[str, bytes]:
        normalized_name = cls._validate_timezone_name(timezone_name)

        candidate = os.path.join(cls._compute_zoneinfo_root(), normalized_name)
        if os.path.isfile(candidate):
            _LOGGER.debug("Reading zone %r from %s", timezone_name, candidate)
            with open(candidate, "rb") as file:
                return candidate, file.read()

        _LOGGER.debug(
            "Zone %r not found at %s, trying tzdata package", timezone_name, candidate
        )
        with cls._load_tzdata_from_package(normalized_name) as file:
            return f"tzdata:{normalized_name}", file.read()

    @staticmethod
    def _compute_zoneinfo_root() -> str:
        tzfiles_dir = os.environ.get(TZFILES_DIR_ENV)
        if tzfiles_dir:
            return tzfiles_dir
        if os.name == "nt":
            return os.path.join(os.path.expanduser("~"), ".zoneinfo")
        return "/usr/share/zoneinfo"

    @staticmethod
    def _validate_timezone_name(timezone_name: str) -> str:
        """Reject names that would escape the zoneinfo root."""
        if os.path.isabs(timezone_name):
            raise ValueError(
                f"Timezone name must be relative to the zoneinfo root: {timezone_name!r}"
            )

        parts = timezone_name.replace("\\", "/").split("/")
        if any(part in ("", os.curdir, os.pardir) for part in parts):
            raise ValueError(f"Invalid timezone name: {timezone_name!r}")

        return "/".join(parts)

    @staticmethod
    def _load_tzdata_from_package(timezone_name: str) -> IO[bytes]:
        region, _, zone = timezone_name.rpartition("/")
        packages = ["tzdata.zoneinfo"] + (region.split("/") if region else [])
        package_name = ".".join(packages)
        try:
            return resources.files(package_name).joinpath(zone).open("rb")
        except (ImportError, FileNotFoundError, UnicodeEncodeError) as exc:
            raise FileNotFoundError(
                f"No zone file for {timezone_name!r} in the tzdata package"
            ) from exc

    def __repr__(self) -> str:
        return (
            f"TZFile(timezone_name={self.timezone_name!r}, "
            f"filepath={self.filepath!r}, "
            f"header={self.header!r}, "
            f"data={self.data!r})"
        )
