"""Strategy driven by a person typing at a prompt."""

from collections.abc import Callable, Sequence

from vecrace.models import Direction, Player, Strategy

STOP_WORDS = {"", "stop", "none"}


class HumanStrategy(Strategy):
    """Asks for a direction and an acceleration on every turn.

    Input and output functions are injectable so the prompt can be
    driven from tests or another front end.
    """

    def __init__(
        self,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print,
    ):
        self.input_func = input_func
        self.output_func = output_func

    def choose_direction(self, player: Player, allowed: Sequence[Direction]) -> Direction | None:
        options = " ".join(direction.value for direction in allowed)
        while True:
            answer = self.input_func(
                f"{player.name} at {player.position}, speed {player.speed}. "
                f"Direction [{options}] (empty to stay): "
            )
            if answer.strip().lower() in STOP_WORDS:
                return None
            try:
                direction = Direction.parse(answer)
            except ValueError as exc:
                self.output_func(str(exc))
                continue
            if direction in allowed:
                return direction
            self.output_func(f"{direction.value} is not allowed at this speed")

    def choose_acceleration(self, player: Player) -> int:
        while True:
            answer = self.input_func("Acceleration [-1, 0, 1]: ").strip()
            if answer in ("-1", "0", "1", "+1"):
                return int(answer)
            self.output_func(f"Invalid acceleration: {answer!r}")
