import logging
from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from .. import models, schemas
from ..completion_estimator import calculate_estimated_completion
from ..config import settings
from ..database import get_db
from ..pricing_engine import calculate_framing_price, round_cents

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/orders", tags=["orders"])

BREAKDOWN_COLUMNS = [
    "base_price", "frame_price", "mat_price", "glass_price", "backing_price",
    "labor_price", "rush_fee", "subtotal", "tax", "total",
]

SORTABLE_COLUMNS = (
    "created_at", "updated_at", "order_number", "customer_name", "status",
    "priority", "total", "payment_status", "estimated_completion",
)


def generate_order_number(db: Session) -> str:
    # Highest id, not row count, so deleted orders never free up a number
    last_id = db.query(func.max(models.Order.id)).scalar() or 0
    year = datetime.utcnow().year
    return f"FS-{year}-{str(last_id + 1).zfill(4)}"


def apply_pricing(order: models.Order) -> bool:
    """
    Price the order from its stored specs and copy the breakdown onto it.
    Orders without both image dimensions are left unpriced.
    """
    if not order.image_width or not order.image_height:
        return False
    result = calculate_framing_price({
        "image_width": order.image_width,
        "image_height": order.image_height,
        "mat_width": order.mat_width or 0.0,
        "mat_height": order.mat_height or 0.0,
        "frame_style": order.frame_style,
        "mat_type": order.mat_type,
        "glass_type": order.glass_type,
        "backing_type": order.backing_type,
        "complexity": order.complexity.value,
        "rush": order.priority in models.RUSH_PRIORITIES,
    }, tax_rate=settings.TAX_RATE)
    for column in BREAKDOWN_COLUMNS:
        setattr(order, column, result["breakdown"][column])
    return True


def get_order_or_404(order_id: int, db: Session) -> models.Order:
    order = db.query(models.Order).filter(models.Order.id == order_id).first()
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return order


@router.post("/", response_model=schemas.Order)
def create_order(order: schemas.OrderCreate, db: Session = Depends(get_db)):
    db_order = models.Order(
        order_number=generate_order_number(db),
        customer_name=order.customer_name,
        customer_email=order.customer_email,
        status=order.status,
        priority=order.priority,
        artwork_description=order.artwork_description,
        image_width=order.image_width,
        image_height=order.image_height,
        mat_width=order.mat_width or 0.0,
        mat_height=order.mat_height or 0.0,
        frame_style=order.frame_style or settings.DEFAULT_FRAME_STYLE,
        mat_type=order.mat_type,
        glass_type=order.glass_type or settings.DEFAULT_GLASS_TYPE,
        backing_type=order.backing_type or settings.DEFAULT_BACKING_TYPE,
        complexity=order.complexity or models.Complexity(settings.DEFAULT_COMPLEXITY),
        special_instructions=order.special_instructions,
    )

    if not apply_pricing(db_order):
        db_order.total = order.total or 0.0

    # Workload is read before this order joins the queue
    workload = models.count_active_orders(db)
    db_order.estimated_completion = calculate_estimated_completion(
        workload, db_order.complexity.value, db_order.priority.value,
    )

    db.add(db_order)
    db.commit()
    db.refresh(db_order)
    logger.info(
        "Created order %s total=%s workload=%s est_completion=%s",
        db_order.order_number, db_order.total, workload, db_order.estimated_completion,
    )
    return db_order


@router.get("/", response_model=List[schemas.Order])
def list_orders(
    status: Optional[models.OrderStatus] = None,
    priority: Optional[models.Priority] = None,
    payment_status: Optional[models.PaymentStatus] = None,
    search: Optional[str] = None,
    sort_by: str = "created_at",
    sort_order: str = "desc",
    skip: int = 0,
    limit: int = 50,
    db: Session = Depends(get_db),
):
    """
    Order board listing. `search` matches order number, artwork description
    or customer name. Unknown `sort_by` columns sort by creation time.
    """
    query = db.query(models.Order)
    if status:
        query = query.filter(models.Order.status == status)
    if priority:
        query = query.filter(models.Order.priority == priority)
    if payment_status:
        query = query.filter(models.Order.payment_status == payment_status)
    if search:
        pattern = f"%{search}%"
        query = query.filter(or_(
            models.Order.order_number.ilike(pattern),
            models.Order.artwork_description.ilike(pattern),
            models.Order.customer_name.ilike(pattern),
        ))

    if sort_by not in SORTABLE_COLUMNS:
        sort_by = "created_at"
    column = getattr(models.Order, sort_by)
    if sort_order == "asc":
        query = query.order_by(column.asc(), models.Order.id.asc())
    else:
        query = query.order_by(column.desc(), models.Order.id.desc())
    return query.offset(skip).limit(limit).all()


@router.get("/{order_id}", response_model=schemas.OrderDetail)
def get_order(order_id: int, db: Session = Depends(get_db)):
    return get_order_or_404(order_id, db)


@router.patch("/{order_id}/status", response_model=schemas.Order)
def update_order_status(order_id: int, update: schemas.OrderStatusUpdate,
                        db: Session = Depends(get_db)):
    """
    Move an order along the production board. A change of complexity or
    priority re-prices the order and re-estimates its completion date.
    """
    order = get_order_or_404(order_id, db)

    previous_status = order.status
    order.status = update.status
    order.last_status_update = datetime.utcnow()

    if update.notes:
        entry = f"{order.last_status_update.isoformat(timespec='seconds')}: {update.notes}"
        order.internal_notes = (
            f"{order.internal_notes}\n{entry}" if order.internal_notes else entry
        )

    specs_changed = False
    if update.complexity is not None and update.complexity != order.complexity:
        order.complexity = update.complexity
        specs_changed = True
    if update.priority is not None and update.priority != order.priority:
        order.priority = update.priority
        specs_changed = True

    if specs_changed:
        apply_pricing(order)
        workload = models.count_active_orders(db, exclude_id=order.id)
        order.estimated_completion = calculate_estimated_completion(
            workload, order.complexity.value, order.priority.value,
        )
        logger.info(
            "Re-estimated order %s complexity=%s priority=%s est_completion=%s",
            order.order_number, order.complexity.value, order.priority.value,
            order.estimated_completion,
        )

    db.commit()
    db.refresh(order)
    logger.info("Order %s status %s -> %s", order.order_number,
                previous_status.value, order.status.value)
    return order


def payment_status_for(amount_paid: float, total: float) -> models.PaymentStatus:
    if amount_paid <= 0:
        return models.PaymentStatus.UNPAID
    if amount_paid >= (total or 0.0):
        return models.PaymentStatus.PAID
    return models.PaymentStatus.PARTIAL


@router.post("/{order_id}/payments", response_model=schemas.PaymentResult)
def record_payment(order_id: int, payment: schemas.PaymentCreate,
                   db: Session = Depends(get_db)):
    """
    Record money taken against an order. Negative amounts are refunds.
    The order's running amount_paid and payment_status follow.
    """
    order = get_order_or_404(order_id, db)

    db_payment = models.Payment(
        order_id=order.id,
        amount=payment.amount,
        method=payment.method,
        transaction_id=payment.transaction_id,
        notes=payment.notes,
        status="completed",
    )
    db.add(db_payment)

    order.amount_paid = round_cents((order.amount_paid or 0.0) + payment.amount)
    order.payment_status = payment_status_for(order.amount_paid, order.total)

    db.commit()
    db.refresh(db_payment)
    db.refresh(order)
    logger.info("Payment %s on order %s via %s, paid=%s of %s (%s)",
                payment.amount, order.order_number, payment.method,
                order.amount_paid, order.total, order.payment_status.value)
    return {
        "payment": db_payment,
        "amount_paid": order.amount_paid,
        "balance_due": round_cents((order.total or 0.0) - order.amount_paid),
        "payment_status": order.payment_status,
    }
