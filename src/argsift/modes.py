"""Classification modes for argsift."""

from enum import IntFlag

from .exceptions import ConflictingModeError, InvalidModeError


class Mode(IntFlag):
    """Independent toggles steering how ambiguous options are classified.

    * ``PREFER_FLAG_FOR_UNREG_OPTION`` – an unregistered option followed by a
      value is a flag; the value stays positional (default).
    * ``PREFER_PARAM_FOR_UNREG_OPTION`` – an unregistered option followed by a
      value captures that value as a parameter.
    * ``NO_SPLIT_ON_EQUALSIGN`` – ``--name=value`` is not split on ``=``.
    * ``SINGLE_DASH_IS_MULTIFLAG`` – ``-abc`` expands to flags ``a``, ``b``, ``c``.
    """

    PREFER_FLAG_FOR_UNREG_OPTION = 1 << 0
    PREFER_PARAM_FOR_UNREG_OPTION = 1 << 1
    NO_SPLIT_ON_EQUALSIGN = 1 << 2
    SINGLE_DASH_IS_MULTIFLAG = 1 << 3

    @classmethod
    def validate(cls, mode: int) -> "Mode":
        """Return *mode* as a Mode, rejecting conflicting preference bits."""
        mode = cls(mode)
        if (
            mode & cls.PREFER_FLAG_FOR_UNREG_OPTION
            and mode & cls.PREFER_PARAM_FOR_UNREG_OPTION
        ):
            raise ConflictingModeError(mode)
        return mode

    @classmethod
    def from_names(cls, names: str) -> "Mode":
        """
        Build a Mode from comma separated names.

        Accepts the short aliases from MODE_ALIASES as well as the member
        names, case-insensitively. An empty string yields the default mode.
        """
        mode = cls(0)
        for raw in names.split(","):
            name = raw.strip().lower()
            if not name:
                continue
            if name in MODE_ALIASES:
                mode |= MODE_ALIASES[name]
            elif name.upper() in cls.__members__:
                mode |= cls.__members__[name.upper()]
            else:
                raise InvalidModeError(raw.strip())
        if not mode:
            mode = cls.PREFER_FLAG_FOR_UNREG_OPTION
        return cls.validate(mode)

    def prefers_param(self) -> bool:
        return bool(self & Mode.PREFER_PARAM_FOR_UNREG_OPTION)

    def splits_on_equalsign(self) -> bool:
        return not self & Mode.NO_SPLIT_ON_EQUALSIGN

    def expands_multiflag(self) -> bool:
        return bool(self & Mode.SINGLE_DASH_IS_MULTIFLAG)


DEFAULT_MODE = Mode.PREFER_FLAG_FOR_UNREG_OPTION

MODE_ALIASES = {
    "prefer_flag": Mode.PREFER_FLAG_FOR_UNREG_OPTION,
    "prefer_param": Mode.PREFER_PARAM_FOR_UNREG_OPTION,
    "no_split": Mode.NO_SPLIT_ON_EQUALSIGN,
    "multiflag": Mode.SINGLE_DASH_IS_MULTIFLAG,
}
