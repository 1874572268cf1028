# session.py
from dataclasses import dataclass, field
from typing import List

from board import CELLS, SIZE, Board
from puzzle_generator import PuzzleGenerator, PuzzleGeneratorConfig
from utilities import SeedLike


@dataclass
class CheckResult:
    """Resultado de comparar el tablero del jugador con la solución."""
    errors: int
    complete: bool
    wrong_cells: List[int] = field(default_factory=list)

    @property
    def message(self) -> str:
        if self.errors > 0:
            return f"{self.errors} error(s) found"
        if not self.complete:
            return "Looking good so far!"
        return "Congratulations! Puzzle solved!"


@dataclass
class GameSession:
    """Estado de una partida, propiedad del llamador.

    El motor no guarda estado entre llamadas; todo lo mutable vive aquí.
    """
    board: Board = field(default_factory=list)
    solution: Board = field(default_factory=list)
    given: List[bool] = field(default_factory=list)
    selected: int = -1
    status: str = ""
    seed: SeedLike = None
    verbose: bool = False

    def __post_init__(self) -> None:
        self._generator = PuzzleGenerator(PuzzleGeneratorConfig(seed=self.seed, verbose=self.verbose))

    @property
    def started(self) -> bool:
        return len(self.board) == CELLS

    def _require_game(self) -> None:
        if not self.started:
            raise ValueError("No hay partida en curso; llame a new_game().")

    def _editable(self) -> bool:
        return self.selected >= 0 and not self.given[self.selected]

    def new_game(self, difficulty: str) -> None:
        self.selected = -1
        self.status = "Generating puzzle..."
        puzzle = self._generator.run(difficulty)
        self.board, self.solution, self.given = puzzle
        self.status = f"New {difficulty} puzzle - Good luck!"

    def select(self, index: int) -> bool:
        """Selecciona una casilla editable; una casilla dada anula la selección."""
        self._require_game()
        if not 0 <= index < CELLS:
            raise ValueError(f"Índice fuera de rango: {index}")
        self.selected = -1 if self.given[index] else index
        return self.selected == index

    def enter(self, digit: int) -> bool:
        self._require_game()
        if not 1 <= digit <= SIZE:
            raise ValueError(f"Dígito fuera de rango: {digit}")
        if not self._editable():
            return False
        self.board[self.selected] = digit
        self.status = "Playing..."
        return True

    def erase(self) -> bool:
        self._require_game()
        if not self._editable():
            return False
        self.board[self.selected] = 0
        return True

    def check(self) -> CheckResult:
        self._require_game()
        wrong = [i for i in range(CELLS) if self.board[i] and self.board[i] != self.solution[i]]
        result = CheckResult(errors=len(wrong), complete=all(self.board), wrong_cells=wrong)
        self.status = result.message
        return result
