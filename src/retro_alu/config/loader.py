import yaml
from typing import Dict, Any
from retro_alu.core.alu import AluOp
from .models import HarnessConfig, VectorConfig

class ConfigLoader:
    def load_from_file(self, path: str) -> HarnessConfig:
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
        return self._parse_config(data)

    def load_from_string(self, text: str) -> HarnessConfig:
        return self._parse_config(yaml.safe_load(text))

    def _parse_config(self, data: Dict[str, Any]) -> HarnessConfig:
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Invalid config document: expected a mapping, got {type(data).__name__}")

        title = data.get("title")

        # Parse Vectors
        vectors_data = data.get("vectors")
        if vectors_data is None:
            vectors_data = []
        if not isinstance(vectors_data, list):
            raise ValueError(f"Invalid 'vectors': expected a list, got {type(vectors_data).__name__}")

        vectors = []
        for index, vector_data in enumerate(vectors_data):
            if not isinstance(vector_data, dict):
                raise ValueError(f"Invalid vector #{index}: expected a mapping, got {vector_data!r}")
            if "a" not in vector_data or "op" not in vector_data:
                raise ValueError(f"Invalid vector #{index}: 'a' and 'op' are required")

            op = AluOp.from_mnemonic(vector_data["op"])
            a = self._parse_byte(vector_data["a"])
            b = self._parse_byte(vector_data.get("b", 0))

            if op.is_shift and b != 0:
                print(f"Warning: Operand b={b:#04x} in vector #{index} is ignored by {op.value}")

            vectors.append(VectorConfig(a=a, b=b, op=op))

        return HarnessConfig(
            title=str(title) if title is not None else None,
            vectors=vectors
        )

    def _parse_byte(self, value: Any) -> int:
        result = self._parse_int(value)
        if not 0 <= result <= 0xFF:
            raise ValueError(f"Operand {value!r} is not an 8-bit value.")
        return result

    def _parse_int(self, value: Any) -> int:
        if isinstance(value, bool):
            raise ValueError(f"Invalid integer format: {value}")
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            if value.lower().startswith("0x"):
                return int(value, 16)
            return int(value)
        raise ValueError(f"Invalid integer format: {value}")
