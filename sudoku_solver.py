# sudoku_solver.py
from dataclasses import dataclass
from typing import Iterable

from rich.console import Console

from board import DIGITS, Board, find_empty, validate_board
from constraints import is_valid
from utilities import SeedLike, make_rng, shuffle


@dataclass
class SudokuSolver:
    """Resuelve un tablero de Sudoku por backtracking cronológico.

    Parámetros
    ----------
    board: List[int]
        Tablero plano de 81 casillas con ceros en las vacías. Se modifica
        en el propio objeto recibido.
    randomized: bool, opcional
        Si es ``True`` los candidatos se prueban en un orden aleatorio nuevo
        en cada paso de la recursión (generación); si no, en orden 1..9.
    verbose: bool, opcional
        Si es ``True`` se muestran mensajes del proceso.
    seed: int | numpy.random.Generator, opcional
        Semilla o generador para el orden aleatorio.
    """
    board: Board
    randomized: bool = False
    verbose: bool = False
    seed: SeedLike = None

    def __post_init__(self) -> None:
        validate_board(self.board)
        self.rng = make_rng(self.seed)
        self.console = Console()

    # --------------------------
    # API pública
    # --------------------------
    def solve(self) -> bool:
        """Completa el tablero en sitio. Devuelve ``False`` si no hay solución."""
        solved = self._backtrack(self.board)
        self._log("Tablero completo" if solved else "Sudoku sin solución")
        return solved

    def count_solutions(self, limit: int) -> int:
        """Cuenta soluciones hasta ``limit`` (orden 1..9, sin aleatoriedad).

        El tablero queda como estaba al terminar.
        """
        if limit < 1:
            raise ValueError("El límite debe ser al menos 1.")
        count = self._count(self.board, limit)
        self._log(f"Soluciones encontradas: {count} (límite {limit})")
        return count

    # --------------------------
    # Métodos internos
    # --------------------------
    def _candidates(self) -> Iterable[int]:
        # permutación nueva en cada nivel, nunca compartida entre ramas
        if self.randomized:
            return shuffle(DIGITS, self.rng)
        return DIGITS

    def _backtrack(self, board: Board) -> bool:
        index = find_empty(board)
        if index is None:
            return True  # sin casillas vacías
        for digit in self._candidates():
            if not is_valid(board, index, digit):
                continue
            board[index] = digit
            if self._backtrack(board):
                return True
            board[index] = 0
        self._log(f"Retrocediendo en casilla {index}")
        return False

    def _count(self, board: Board, limit: int) -> int:
        index = find_empty(board)
        if index is None:
            return 1
        count = 0
        for digit in DIGITS:
            if not is_valid(board, index, digit):
                continue
            board[index] = digit
            count += self._count(board, limit - count)
            board[index] = 0
            if count >= limit:
                break
        return count

    def _log(self, msg: str) -> None:
        if self.verbose:
            self.console.print(msg, style="bold cyan")


def solve_deterministic(board: Board, verbose: bool = False) -> bool:
    return SudokuSolver(board, verbose=verbose).solve()


def solve_randomized(board: Board, rng: SeedLike = None, verbose: bool = False) -> bool:
    return SudokuSolver(board, randomized=True, verbose=verbose, seed=rng).solve()


def count_solutions(board: Board, limit: int, verbose: bool = False) -> int:
    return SudokuSolver(board, verbose=verbose).count_solutions(limit)


if __name__ == "__main__":
    from board import from_grid, to_grid

    ejemplo = from_grid([
        [5, 3, 0, 0, 7, 0, 0, 0, 0],
        [6, 0, 0, 1, 9, 5, 0, 0, 0],
        [0, 9, 8, 0, 0, 0, 0, 6, 0],
        [8, 0, 0, 0, 6, 0, 0, 0, 3],
        [4, 0, 0, 8, 0, 3, 0, 0, 1],
        [7, 0, 0, 0, 2, 0, 0, 0, 6],
        [0, 6, 0, 0, 0, 0, 2, 8, 0],
        [0, 0, 0, 4, 1, 9, 0, 0, 5],
        [0, 0, 0, 0, 8, 0, 0, 7, 9],
    ])
    print("Soluciones:", count_solutions(ejemplo, 2))
    solve_deterministic(ejemplo, verbose=True)
    for fila in to_grid(ejemplo):
        print(fila)
