from sqlalchemy import Column, Integer, String, Float, Date, DateTime, Text, Enum, ForeignKey, func
from sqlalchemy.orm import Session, relationship
from datetime import datetime
from .database import Base
import enum


class OrderStatus(str, enum.Enum):
    QUOTE = "quote"
    APPROVED = "approved"
    IN_PRODUCTION = "in_production"
    QUALITY_CHECK = "quality_check"
    READY = "ready"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Priority(str, enum.Enum):
    STANDARD = "standard"
    RUSH = "rush"
    EXPRESS = "express"


class Complexity(str, enum.Enum):
    SIMPLE = "simple"
    MEDIUM = "medium"
    COMPLEX = "complex"


class PaymentStatus(str, enum.Enum):
    UNPAID = "unpaid"
    PARTIAL = "partial"
    PAID = "paid"
    REFUNDED = "refunded"


# Orders on the production bench; their count is the shop workload
ACTIVE_PRODUCTION_STATUSES = [
    OrderStatus.APPROVED,
    OrderStatus.IN_PRODUCTION,
    OrderStatus.QUALITY_CHECK,
]

# Priorities that carry the rush surcharge on the price
RUSH_PRIORITIES = [Priority.RUSH, Priority.EXPRESS]


class Order(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)
    order_number = Column(String, unique=True, nullable=False)
    customer_name = Column(String, nullable=True)
    customer_email = Column(String, nullable=True)
    status = Column(Enum(OrderStatus), default=OrderStatus.QUOTE, nullable=False)
    priority = Column(Enum(Priority), default=Priority.STANDARD, nullable=False)

    # Artwork (inches), mat border is per side
    artwork_description = Column(Text)
    image_width = Column(Float, nullable=True)
    image_height = Column(Float, nullable=True)
    mat_width = Column(Float, default=0.0)
    mat_height = Column(Float, default=0.0)

    # Material keys from the pricing catalog
    frame_style = Column(String, nullable=True)
    mat_type = Column(String, nullable=True)
    glass_type = Column(String, nullable=True)
    backing_type = Column(String, nullable=True)
    complexity = Column(Enum(Complexity), default=Complexity.MEDIUM, nullable=False)
    special_instructions = Column(Text)

    # Price breakdown snapshot (cents-rounded)
    base_price = Column(Float, nullable=True)
    frame_price = Column(Float, nullable=True)
    mat_price = Column(Float, nullable=True)
    glass_price = Column(Float, nullable=True)
    backing_price = Column(Float, nullable=True)
    labor_price = Column(Float, nullable=True)
    rush_fee = Column(Float, default=0.0)
    subtotal = Column(Float, nullable=True)
    tax = Column(Float, nullable=True)
    total = Column(Float, default=0.0)

    # Payments received against the total
    amount_paid = Column(Float, default=0.0)
    payment_status = Column(Enum(PaymentStatus), default=PaymentStatus.UNPAID, nullable=False)

    internal_notes = Column(Text)

    estimated_completion = Column(Date, nullable=True)
    last_status_update = Column(DateTime, default=datetime.utcnow)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    payments = relationship("Payment", back_populates="order", cascade="all, delete-orphan",
                            order_by="Payment.created_at.desc()")


class Payment(Base):
    __tablename__ = "payments"

    id = Column(Integer, primary_key=True, index=True)
    order_id = Column(Integer, ForeignKey("orders.id"), nullable=False)
    amount = Column(Float, nullable=False)  # negative for refunds
    method = Column(String, nullable=False)  # cash, card, check, ...
    status = Column(String, default="completed")
    transaction_id = Column(String, nullable=True)
    notes = Column(Text)
    created_at = Column(DateTime, default=datetime.utcnow)

    order = relationship("Order", back_populates="payments")


def count_active_orders(db: Session, exclude_id: int = None) -> int:
    """Current shop workload: orders approved, in production or in quality check."""
    query = db.query(func.count(Order.id)).filter(
        Order.status.in_(ACTIVE_PRODUCTION_STATUSES)
    )
    if exclude_id is not None:
        query = query.filter(Order.id != exclude_id)
    return query.scalar() or 0
