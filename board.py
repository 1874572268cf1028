# -*- coding: utf-8 -*-
"""board

Tablero de Sudoku 9x9 como lista plana de 81 enteros (fila mayor).
0 representa una casilla vacía; índice = fila * 9 + columna.
"""

from typing import List, Optional, Tuple

SIZE = 9
BOX = 3
CELLS = SIZE * SIZE
DIGITS = tuple(range(1, SIZE + 1))

Board = List[int]
Grid = List[List[int]]


def empty_board() -> Board:
    return [0] * CELLS


def row_col(index: int) -> Tuple[int, int]:
    return index // SIZE, index % SIZE


def box_origin(index: int) -> Tuple[int, int]:
    """Esquina superior izquierda de la caja 3x3 que contiene la casilla."""
    r, c = row_col(index)
    return (r // BOX) * BOX, (c // BOX) * BOX


def find_empty(board: Board) -> Optional[int]:
    """Primera casilla vacía en orden fila mayor, o ``None`` si no hay."""
    for i in range(CELLS):
        if board[i] == 0:
            return i
    return None


def validate_board(board: Board) -> None:
    if len(board) != CELLS:
        raise ValueError(f"El tablero debe tener {CELLS} casillas.")
    if any(not 0 <= v <= SIZE for v in board):
        raise ValueError("Las casillas deben contener valores entre 0 y 9.")


def to_grid(board: Board) -> Grid:
    return [list(board[r * SIZE:(r + 1) * SIZE]) for r in range(SIZE)]


def from_grid(grid: Grid) -> Board:
    if len(grid) != SIZE or any(len(row) != SIZE for row in grid):
        raise ValueError("El tablero debe ser 9x9.")
    return [int(v) for row in grid for v in row]


def is_solved(board: Board) -> bool:
    """Comprueba que cada fila, columna y caja sea una permutación de 1..9."""
    full = set(DIGITS)
    for k in range(SIZE):
        row = {board[k * SIZE + c] for c in range(SIZE)}
        col = {board[r * SIZE + k] for r in range(SIZE)}
        br, bc = (k // BOX) * BOX, (k % BOX) * BOX
        box = {board[(br + i) * SIZE + bc + j] for i in range(BOX) for j in range(BOX)}
        if row != full or col != full or box != full:
            return False
    return True
