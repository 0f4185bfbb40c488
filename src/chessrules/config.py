"""Engine settings."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import PieceType
from chessrules.core.piece import parse_promotion


@dataclass
class EngineSettings:
    """All user-configurable rule options."""

    # Piece substituted when promoting moves are simulated for legality
    simulation_promotion: PieceType = PieceType.QUEEN

    # Declare K v K, K+minor v K and same-colored K+B v K+B drawn automatically
    insufficient_material_draw: bool = False

    # Default wait (seconds) for a player's move; None waits forever
    request_timeout: float | None = None

    def __post_init__(self) -> None:
        # Accepts the same tags as a promotion choice; raises PromotionChoiceError
        self.simulation_promotion = parse_promotion(self.simulation_promotion)
