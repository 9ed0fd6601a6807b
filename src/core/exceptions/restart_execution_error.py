class RestartExecutionError(Exception):
    def __init__(self, name: str, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(f"Failed to restart container '{name}': {reason}")
