from .text_metrics import PillowLabelMeasurer, measure_largest, text_size

__all__ = [
    "PillowLabelMeasurer",
    "measure_largest",
    "text_size",
]
