class ConfigurationError(Exception):
    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__(f"Configuration validation failed with {len(errors)} error(s): {'; '.join(errors)}")
