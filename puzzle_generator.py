# -*- coding: utf-8 -*-
"""puzzle_generator

Generación de Sudokus jugables:
  1) Tablero resuelto mediante backtracking con orden aleatorio
  2) Copia y vaciado de casillas según la dificultad
  3) Máscara de casillas dadas (no editables)

Por defecto no se comprueba que la solución sea única; la comprobación es
costosa y puede activarse con ``verify_unique=True``.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from rich.console import Console
from tqdm import tqdm

from board import CELLS, Board, empty_board
from sudoku_solver import SudokuSolver
from utilities import SeedLike, make_rng, shuffle

# casillas a vaciar (no casillas que quedan)
DIFFICULTY_REMOVALS: Dict[str, int] = {
    "easy": 35,
    "medium": 45,
    "hard": 55,
}
DEFAULT_REMOVALS = 40


@dataclass
class Puzzle:
    """Sudoku generado: tablero jugable, solución y máscara de dadas."""
    puzzle: Board
    solution: Board
    given: List[bool]
    difficulty: str = ""

    def __iter__(self) -> Iterator[List]:
        # permite `puzzle, solution, given = generate(...)`
        return iter((self.puzzle, self.solution, self.given))

    @property
    def clues(self) -> int:
        return sum(self.given)


@dataclass
class PuzzleGeneratorConfig:
    """Configuración del generador de Sudokus."""
    difficulty: str = "medium"
    seed: SeedLike = None
    verbose: bool = False
    removals: Dict[str, int] = field(default_factory=lambda: dict(DIFFICULTY_REMOVALS))
    default_removals: int = DEFAULT_REMOVALS
    verify_unique: bool = False  # vaciar solo si la solución sigue siendo única


class PuzzleGenerator:
    def __init__(self, config: PuzzleGeneratorConfig):
        self.cfg = config
        self.rng = make_rng(config.seed)
        self.console = Console()

    def _log(self, msg: str) -> None:
        if self.cfg.verbose:
            self.console.print(msg, style="bold cyan")

    def removal_count(self, difficulty: Optional[str] = None) -> int:
        difficulty = self.cfg.difficulty if difficulty is None else difficulty
        return self.cfg.removals.get(difficulty, self.cfg.default_removals)

    def _solved_board(self) -> Board:
        board = empty_board()
        # un tablero vacío siempre tiene solución
        SudokuSolver(board, randomized=True, seed=self.rng).solve()
        return board

    def _is_unique(self, board: Board) -> bool:
        return SudokuSolver(list(board)).count_solutions(2) == 1

    def _remove_cells(self, board: Board, remove_count: int) -> int:
        removed = 0
        for index in shuffle(range(CELLS), self.rng):
            if removed >= remove_count:
                break
            backup = board[index]
            board[index] = 0
            if self.cfg.verify_unique and not self._is_unique(board):
                board[index] = backup
                continue
            removed += 1
        return removed

    def run(self, difficulty: Optional[str] = None) -> Puzzle:
        """Genera un Sudoku con la dificultad indicada (o la configurada)."""
        difficulty = self.cfg.difficulty if difficulty is None else difficulty

        self._log("[1/3] Generando tablero resuelto...")
        solution = self._solved_board()

        remove_count = self.removal_count(difficulty)
        self._log(f"[2/3] Vaciando {remove_count} casillas ({difficulty})...")
        puzzle = list(solution)
        removed = self._remove_cells(puzzle, remove_count)
        if removed < remove_count:
            self._log(f"⚠️ Solo se vaciaron {removed} casillas manteniendo solución única.")

        self._log("[3/3] Marcando casillas dadas...")
        given = [v != 0 for v in puzzle]

        self._log(f"✅ Sudoku {difficulty} generado con {sum(given)} pistas")
        return Puzzle(puzzle=puzzle, solution=solution, given=given, difficulty=difficulty)


def generate(difficulty: str, rng: SeedLike = None, verbose: bool = False) -> Puzzle:
    cfg = PuzzleGeneratorConfig(difficulty=difficulty, seed=rng, verbose=verbose)
    return PuzzleGenerator(cfg).run()


def generate_batch(count: int, difficulty: str = "medium", seed: SeedLike = None,
                   verbose: bool = False) -> List[Puzzle]:
    """Genera ``count`` Sudokus compartiendo un mismo generador aleatorio."""
    generator = PuzzleGenerator(PuzzleGeneratorConfig(difficulty=difficulty, seed=seed))
    it = range(count)
    if verbose:
        it = tqdm(it, desc=f"Generando ({difficulty})", ncols=80, colour="blue")
    return [generator.run() for _ in it]
