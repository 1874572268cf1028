# constraints.py
from board import BOX, SIZE, Board, box_origin, row_col


def is_valid(board: Board, index: int, digit: int) -> bool:
    """Indica si ``digit`` puede colocarse en ``index`` sin repetirse.

    Se evalúa contra el estado actual del tablero: fila, columna y caja 3x3.
    No modifica el tablero ni valida rangos (responsabilidad del llamador).
    """
    r, c = row_col(index)
    # fila / columna
    for k in range(SIZE):
        if board[r * SIZE + k] == digit:
            return False
        if board[k * SIZE + c] == digit:
            return False
    # subcuadro
    br, bc = box_origin(index)
    for i in range(br, br + BOX):
        for j in range(bc, bc + BOX):
            if board[i * SIZE + j] == digit:
                return False
    return True
