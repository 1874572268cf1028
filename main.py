# -*- coding: utf-8 -*-
"""main

Demostración del motor de Sudoku:
  1) Generación de un tablero resuelto con backtracking aleatorio
  2) Vaciado de casillas según la dificultad
  3) Conteo de soluciones del Sudoku resultante (hasta 2)
  4) Resolución determinista y comparación con la solución generada

Con VERBOSE=True se muestran los mensajes de cada etapa.
"""

from typing import List

from rich import print

from board import CELLS, SIZE, Board, is_solved, to_grid
from puzzle_generator import PuzzleGenerator, PuzzleGeneratorConfig
from sudoku_solver import count_solutions, solve_deterministic

DIFFICULTY = "medium"
SEED = None
VERBOSE = False


def _format(board: Board, given: List[bool]) -> str:
    lines = []
    for r, row in enumerate(to_grid(board)):
        if r in (3, 6):
            lines.append("------+-------+------")
        cells = []
        for c, v in enumerate(row):
            if c in (3, 6):
                cells.append("|")
            if v == 0:
                cells.append("[dim].[/dim]")
            elif given[r * SIZE + c]:
                cells.append(f"[bold]{v}[/bold]")
            else:
                cells.append(str(v))
        lines.append(" ".join(cells))
    return "\n".join(lines)


if __name__ == "__main__":
    # 1-2) Generar
    generator = PuzzleGenerator(PuzzleGeneratorConfig(
        difficulty=DIFFICULTY,
        seed=SEED,
        verbose=VERBOSE,
    ))
    puzzle = generator.run()

    print(f"\nSudoku ({DIFFICULTY}, {puzzle.clues} pistas):")
    print(_format(puzzle.puzzle, puzzle.given))

    # 3) Unicidad (informativo, la generación no la exige)
    n = count_solutions(list(puzzle.puzzle), 2, verbose=VERBOSE)
    print("\nSolución única" if n == 1 else "\n[yellow]El Sudoku admite varias soluciones[/yellow]")

    # 4) Resolver
    solved = list(puzzle.puzzle)
    if not solve_deterministic(solved, verbose=VERBOSE) or not is_solved(solved):
        raise ValueError("Sudoku sin solución")

    print("\nSudoku resuelto:")
    print(_format(solved, [True] * CELLS))
    if solved != puzzle.solution:
        print("[yellow]La solución encontrada difiere de la generada.[/yellow]")
