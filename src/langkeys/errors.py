class LangKeysError(Exception):
    code = "VALIDATION_ERROR"


class NoEligibleFiles(LangKeysError):
    code = "NO_JSON_FILES"

    def __init__(self, directory: str) -> None:
        super().__init__(f"No lang_*.json files found in {directory}")
        self.directory = directory


class DirectoryUnreadable(LangKeysError):
    code = "VALIDATION_ERROR"

    def __init__(self, directory: str, reason: str) -> None:
        super().__init__(f"Cannot read directory {directory}: {reason}")
        self.directory = directory
        self.reason = reason


class MalformedTranslationFile(LangKeysError):
    code = "MALFORMED_FILE"

    def __init__(self, filename: str, reason: str) -> None:
        super().__init__(f"Error parsing {filename}: {reason}")
        self.filename = filename
        self.reason = reason


class ConfigError(LangKeysError):
    code = "CONFIG_ERROR"
