from dataclasses import dataclass

# ==================================================
# Generated Output
# ==================================================

@dataclass(frozen=True)
class GeneratedSource:
    """
    One generated visitor module, held in memory until it is written.
    """
    class_name: str
    module_name: str
    text: str
    method_count: int = 0

    @property
    def filename(self) -> str:
        return f"{self.module_name}.py"
