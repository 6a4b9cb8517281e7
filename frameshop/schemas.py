from pydantic import BaseModel, Field
from typing import Optional, List, Dict
from datetime import date, datetime
from .models import OrderStatus, Priority, Complexity, PaymentStatus


class FramingSpecs(BaseModel):
    # Everything optional: the order form asks for a price while half-filled
    image_width: Optional[float] = None
    image_height: Optional[float] = None
    mat_width: Optional[float] = 0.0
    mat_height: Optional[float] = 0.0
    frame_style: Optional[str] = None
    mat_type: Optional[str] = None
    glass_type: Optional[str] = None
    backing_type: Optional[str] = None
    complexity: Complexity = Complexity.MEDIUM
    rush: bool = False


class PriceBreakdown(BaseModel):
    base_price: float
    frame_price: float
    mat_price: float
    glass_price: float
    backing_price: float
    labor_price: float
    rush_fee: float
    subtotal: float
    tax: float
    total: float


class FinishedSize(BaseModel):
    width: float
    height: float
    area: float


class PriceEstimate(BaseModel):
    breakdown: PriceBreakdown
    finished_size: FinishedSize


class CompletionRequest(BaseModel):
    current_workload: int = Field(0, ge=0)
    complexity: Complexity = Complexity.MEDIUM
    priority: Priority = Priority.STANDARD


class CompletionEstimate(BaseModel):
    processing_days: int
    estimated_completion: date


class OrderCreate(BaseModel):
    customer_name: Optional[str] = None
    customer_email: Optional[str] = None
    status: OrderStatus = OrderStatus.QUOTE
    priority: Priority = Priority.STANDARD
    artwork_description: Optional[str] = None
    image_width: Optional[float] = None
    image_height: Optional[float] = None
    mat_width: Optional[float] = None
    mat_height: Optional[float] = None
    frame_style: Optional[str] = None
    mat_type: Optional[str] = None
    glass_type: Optional[str] = None
    backing_type: Optional[str] = None
    complexity: Optional[Complexity] = None
    special_instructions: Optional[str] = None
    total: Optional[float] = None  # Manual total for orders without dimensions


class OrderStatusUpdate(BaseModel):
    status: OrderStatus
    complexity: Optional[Complexity] = None
    priority: Optional[Priority] = None
    notes: Optional[str] = None  # appended to internal_notes with a timestamp


class PaymentCreate(BaseModel):
    amount: float  # negative records a refund
    method: str
    transaction_id: Optional[str] = None
    notes: Optional[str] = None


class Payment(BaseModel):
    id: int
    order_id: int
    amount: float
    method: str
    status: str
    transaction_id: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime
    class Config:
        from_attributes = True


class PaymentResult(BaseModel):
    payment: Payment
    amount_paid: float
    balance_due: float
    payment_status: PaymentStatus


class Order(BaseModel):
    id: int
    order_number: str
    customer_name: Optional[str] = None
    customer_email: Optional[str] = None
    status: OrderStatus
    priority: Priority
    artwork_description: Optional[str] = None
    image_width: Optional[float] = None
    image_height: Optional[float] = None
    mat_width: Optional[float] = None
    mat_height: Optional[float] = None
    frame_style: Optional[str] = None
    mat_type: Optional[str] = None
    glass_type: Optional[str] = None
    backing_type: Optional[str] = None
    complexity: Complexity
    special_instructions: Optional[str] = None
    base_price: Optional[float] = None
    frame_price: Optional[float] = None
    mat_price: Optional[float] = None
    glass_price: Optional[float] = None
    backing_price: Optional[float] = None
    labor_price: Optional[float] = None
    rush_fee: Optional[float] = None
    subtotal: Optional[float] = None
    tax: Optional[float] = None
    total: Optional[float] = None
    amount_paid: Optional[float] = 0.0
    payment_status: PaymentStatus = PaymentStatus.UNPAID
    internal_notes: Optional[str] = None
    estimated_completion: Optional[date] = None
    last_status_update: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime
    class Config:
        from_attributes = True


class OrderDetail(Order):
    payments: List[Payment] = []


class MaterialOption(BaseModel):
    key: str
    unit_price: float


class MaterialCategory(BaseModel):
    unit: str
    default_unit_price: float
    options: List[MaterialOption]


class PricingTier(BaseModel):
    max_size: Optional[float] = None  # None = no upper bound
    base_price: float
    labor_multiplier: float


class MaterialCatalog(BaseModel):
    materials: Dict[str, MaterialCategory]
    tiers: List[PricingTier]
    complexity_multipliers: Dict[str, float]
    rush_surcharge: float
