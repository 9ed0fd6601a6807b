class ContainerNotFoundError(Exception):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Container '{name}' not found")
