from pydantic import BaseModel, ConfigDict

# ==================== CLASE BASE PARA RESPUESTAS (Pydantic v2) ====================

class InventoryBaseModel(BaseModel):
    """
    Base for the response schemas that are built straight from ORM rows.
    """
    model_config = ConfigDict(from_attributes=True)
