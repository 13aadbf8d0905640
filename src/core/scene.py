class Scene:
    """Hooks the engine calls on whatever scene it hosts."""

    def update(self, dt_ms: float) -> None:
        pass

    # Scenes return True when they consumed the event
    def handle_event(self, event) -> bool:
        return False

    # Scenes own their full render pipeline
    def render(self, screen, text=None) -> None:  # pragma: no cover - visual
        pass
