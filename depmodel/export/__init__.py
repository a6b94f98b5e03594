"""Model export formats."""

from depmodel.export.json import export_json, model_to_dict

__all__ = ["export_json", "model_to_dict"]
