"""유사도 행렬 출력 포맷"""
from typing import List, Sequence

ROW_SHIFT = "++++ "


def format_matrix(rows: Sequence[Sequence[float]]) -> str:
    """
    상삼각 유사도 행렬을 텍스트 표로 변환

    i번째 행 앞에는 생략된 하삼각 칸 수만큼 "++++ "를 붙이고,
    각 값은 소수점 둘째 자리까지 공백으로 구분한다.
    """
    lines: List[str] = []
    for i, row in enumerate(rows):
        cells = "".join(f"{value:.2f} " for value in row)
        lines.append(ROW_SHIFT * i + cells)
    return "\n".join(lines)
