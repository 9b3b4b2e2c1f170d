"""Data models for installed package records."""

from datetime import datetime

from pydantic import BaseModel, ByteSize, ConfigDict, Field, TypeAdapter, ValidationError, computed_field

from pacreader.utils import try_parse_date

OptionalStr = str | None

_byte_size = TypeAdapter(ByteSize)


class OptionalDependency(BaseModel):
    """One entry of a package's "Optional Deps" list."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: OptionalStr = None
    is_installed: bool = False


class PackageRecord(BaseModel):
    """Represents one installed package as reported by `pacman -Qi`."""

    model_config = ConfigDict(frozen=True)

    name: str
    version: str
    description: str
    architecture: str
    url: OptionalStr = None
    licenses: list[str] = Field(default_factory=list)
    groups: OptionalStr = None
    provides: OptionalStr = None
    depends_on: OptionalStr = None
    optional_dependencies: list[OptionalDependency] | None = None
    required_by: OptionalStr = None
    optional_for: OptionalStr = None
    conflicts_with: OptionalStr = None
    replaces: OptionalStr = None
    installed_size: str
    packager: str
    build_date: str
    install_date: str
    install_reason: str
    install_script: str
    validated_by: OptionalStr = None

    @computed_field
    @property
    def licenses_str(self) -> str:
        """Licenses joined into a single display string."""
        return ", ".join(self.licenses)

    @computed_field
    @property
    def url_str(self) -> str:
        """URL, or an empty string when the package has none."""
        return self.url or ""

    @computed_field
    @property
    def installed_size_bytes(self) -> int | None:
        """Installed size in bytes, or None if pacman's size string is not understood."""
        try:
            return int(_byte_size.validate_python(self.installed_size))
        except ValidationError:
            return None

    @computed_field
    @property
    def installed_size_str(self) -> str:
        """Installed size formatted as a human-readable string."""
        size = self.installed_size_bytes
        if size is None:
            return "-"
        return ByteSize(size).human_readable()

    @computed_field
    @property
    def build_timestamp(self) -> datetime | None:
        return try_parse_date(self.build_date)

    @computed_field
    @property
    def install_timestamp(self) -> datetime | None:
        return try_parse_date(self.install_date)
