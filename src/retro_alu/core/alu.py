# retro_alu/core/alu.py
"""
8ビット ALU (算術論理演算ユニット) コア。

2つの8ビットオペランドと演算種別から、演算結果と4つのステータスフラグ
（Z, C, N, V）を導出する純粋関数を提供します。内部状態を持たないため、
複数スレッドから同期なしで呼び出すことができます。
"""
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Tuple

from retro_alu.common.types import Byte, FlagMap

# @intent:responsibility ALUが実行できる演算の閉じた集合を定義します。値はニーモニックです。
class AluOp(Enum):
    ADD = "ADD"
    SUB = "SUB"
    AND = "AND"
    OR = "OR"
    XOR = "XOR"
    SHL = "SHL"  # Shift left logical
    SHR = "SHR"  # Shift right logical

    # @intent:responsibility シフト演算（単項演算、オペランドBを使用しない）かどうかを返します。
    @property
    def is_shift(self) -> bool:
        return self in (AluOp.SHL, AluOp.SHR)

    # @intent:responsibility ニーモニック文字列（大文字小文字を区別しない）から演算を取得します。
    # @intent:pre-condition 未定義のニーモニックは ValueError となります。
    @classmethod
    def from_mnemonic(cls, text: str) -> "AluOp":
        try:
            return cls(str(text).strip().upper())
        except ValueError:
            raise ValueError(f"Unknown ALU operation: {text}") from None

# @intent:responsibility 1回の演算で導出されたステータスフラグを不変に保持します。
@dataclass(frozen=True)
class AluFlags:
    """
    ALUのステータスフラグ。

    全フィールドの既定値は False であり、評価のたびに新しいインスタンスが
    生成されるため、前回の評価結果が持ち越されることはありません。
    """
    z: bool = False  # Zero
    c: bool = False  # Carry (ADD: carry out / SUB: borrow / shift: 押し出されたビット)
    n: bool = False  # Negative (bit 7)
    v: bool = False  # Overflow (2's complement)

    # @intent:responsibility フラグ状態を表示用の辞書形式（Z, C, N, V の順）で返します。
    def as_dict(self) -> FlagMap:
        return {"Z": self.z, "C": self.c, "N": self.n, "V": self.v}

# @intent:utility_function 加算の符号付きオーバーフローを判定します。
def overflow_add(a: Byte, b: Byte, result: Byte) -> bool:
    # 同符号の加算で、結果の符号がオペランドと異なる場合
    return (~(a ^ b) & (a ^ result) & 0x80) != 0

# @intent:utility_function 減算 (a - b) の符号付きオーバーフローを判定します。
def overflow_sub(a: Byte, b: Byte, result: Byte) -> bool:
    # 異符号の減算で、結果の符号が a と異なる場合
    return ((a ^ b) & (a ^ result) & 0x80) != 0

# 各実行関数は (result, carry, overflow) を返す。Z, N は evaluate で共通に算出する。
_Outcome = Tuple[Byte, bool, bool]

def _execute_add(a: Byte, b: Byte) -> _Outcome:
    temp = a + b
    res = temp & 0xFF
    return res, temp > 0xFF, overflow_add(a, b, res)

# @intent:note SUBのCarryは「借り(borrow)が発生した」ことを示す (a < b で 1)。
#              「借りが無い」ことを示す6502式の反転キャリーではない。
def _execute_sub(a: Byte, b: Byte) -> _Outcome:
    res = (a - b) & 0xFF
    return res, a < b, overflow_sub(a, b, res)

def _execute_and(a: Byte, b: Byte) -> _Outcome:
    return a & b, False, False

def _execute_or(a: Byte, b: Byte) -> _Outcome:
    return a | b, False, False

def _execute_xor(a: Byte, b: Byte) -> _Outcome:
    return a ^ b, False, False

# @intent:note シフトは b を無視し、Vは計算しない。
def _execute_shl(a: Byte, b: Byte) -> _Outcome:
    return (a << 1) & 0xFF, (a & 0x80) != 0, False  # MSB before shift

def _execute_shr(a: Byte, b: Byte) -> _Outcome:
    return a >> 1, (a & 0x01) != 0, False  # LSB before shift

# @intent:map 演算種別から実行関数へのマッピングテーブル。AluOp の全メンバーを網羅する。
EXECUTE_MAP: Dict[AluOp, Callable[[Byte, Byte], _Outcome]] = {
    AluOp.ADD: _execute_add,
    AluOp.SUB: _execute_sub,
    AluOp.AND: _execute_and,
    AluOp.OR: _execute_or,
    AluOp.XOR: _execute_xor,
    AluOp.SHL: _execute_shl,
    AluOp.SHR: _execute_shr,
}

def _check_byte(name: str, value: Byte) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 0xFF:
        raise ValueError(f"Operand {name} {value!r} is not an 8-bit value.")

# @intent:responsibility 2つの8ビットオペランドに演算を適用し、結果とフラグを返します。
# @intent:pre-condition a, b は 0..255 の整数、op は AluOp のメンバーである必要があります。
def evaluate(a: Byte, b: Byte, op: AluOp) -> Tuple[Byte, AluFlags]:
    """
    ALUの1回分の評価を行い、(result, flags) を返します。

    未定義の演算は表現できないものとして扱い、AluOp 以外が渡された場合は
    結果0を黙って返すのではなく ValueError を送出します。
    """
    _check_byte("a", a)
    _check_byte("b", b)
    executor = EXECUTE_MAP.get(op) if isinstance(op, AluOp) else None
    if executor is None:
        raise ValueError(f"Unsupported ALU operation: {op!r}")

    result, carry, overflow = executor(a, b)

    # 共通のフラグ更新
    return result, AluFlags(
        z=result == 0,
        c=carry,
        n=(result & 0x80) != 0,
        v=overflow,
    )
