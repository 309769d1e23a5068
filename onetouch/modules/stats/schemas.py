from pydantic import BaseModel, Field, ConfigDict

class StatsResponse(BaseModel):
    """Serialized with the flat lowercase keys existing dashboard clients read"""
    model_config = ConfigDict(populate_by_name=True)

    total_products: int = Field(0, alias="totalproducts")
    total_value: float = Field(0, alias="totalvalue")
    low_stock: int = Field(0, alias="lowstock")
    total_sales: int = Field(0, alias="totalsales")
    total_revenue: float = Field(0, alias="totalrevenue")
    total_profit: float = Field(0, alias="totalprofit")
    today_sales: int = Field(0, alias="todaysales")
