# invoicing/main.py

import logging

from fastapi import FastAPI

from invoicing.api.auth import router as auth_router
from invoicing.api.customers import router as customers_router
from invoicing.api.invoices import router as invoices_router
from invoicing.config import LOG_FORMAT, LOG_LEVEL

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

app = FastAPI(
    title="Invoicing Dashboard API",
    version="0.1.0",
)

@app.get("/health")
def health_check():
    return {"status": "ok"}

app.include_router(auth_router)
app.include_router(customers_router)
app.include_router(invoices_router)
