INSTOCK = "instock"
LOWSTOCK = "lowstock"
OUTSTOCK = "outstock"

LOW_STOCK_THRESHOLD = 10


def stock_status(stock) -> str:
    """Classify availability: <=0 outstock, below the threshold lowstock, else instock."""
    stock = int(stock or 0)
    if stock <= 0:
        return OUTSTOCK
    if stock < LOW_STOCK_THRESHOLD:
        return LOWSTOCK
    return INSTOCK
