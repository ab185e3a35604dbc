class IrradianceError(Exception): ...


class RowParseError(IrradianceError): ...


class SourceUnavailableError(IrradianceError): ...


class ConfigError(IrradianceError): ...
