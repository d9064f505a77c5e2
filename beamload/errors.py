"""Exception types raised by the loading planner."""


class LoadingError(Exception):
    """Base class for every error raised while planning a load."""


class InvalidConfiguration(LoadingError, ValueError):
    pass


class InvalidOrderLine(LoadingError, ValueError):
    pass


class BeamNotFoundError(LoadingError, LookupError):
    def __init__(self, beam_id: str) -> None:
        super().__init__(f"beam '{beam_id}' not found in catalog")
        self.beam_id = beam_id


class StabilityViolation(LoadingError):
    """Raised when a layer cannot be supported by the layer beneath it.

    Only the engine catches this; it switches to width-ordered stacking.
    """

    def __init__(self, layer_index: int, excess: float) -> None:
        super().__init__(
            f"layer {layer_index + 1} exceeds the layer below by {excess:.1f}cm "
            "and the clearance does not fit the bed"
        )
        self.layer_index = layer_index
        self.excess = excess
