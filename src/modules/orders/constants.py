"""Order domain constants.

Defines the status choices of the order delivery lifecycle.
Any non-terminal status may move to any status; ``delivered`` is
terminal and only ``pending`` orders may be deleted.
"""

from django.db import models


class OrderStatus(models.TextChoices):
    PENDING = "pending", "Pending"
    PREPARING = "preparing", "Preparing"
    OUT_FOR_DELIVERY = "out-for-delivery", "Out for delivery"
    DELIVERED = "delivered", "Delivered"


TERMINAL_STATES: set[str] = {OrderStatus.DELIVERED.value}

DELETABLE_STATES: set[str] = {OrderStatus.PENDING.value}

STATUS_MESSAGE = "Order must have a status of " + ", ".join(OrderStatus.values)
