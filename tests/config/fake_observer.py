"""Fake ConfigObserver for use in tests — records events without mocking."""


class FakeConfigObserver:
    def __init__(self) -> None:
        self.loaded: list[dict[str, str]] = []
        self.unseeded: list[str] = []

    def config_loaded(self, name: str, version: str) -> None:
        self.loaded.append({"name": name, "version": version})

    def config_unseeded_approach_warning(self, approach: str) -> None:
        self.unseeded.append(approach)
