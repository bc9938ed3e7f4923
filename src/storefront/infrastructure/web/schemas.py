"""Pydantic request/response schemas for the storefront API."""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- Request Schemas ---


class AddToCartRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"product_id": "1", "qty": 2}]}}

    product_id: str = Field(..., max_length=64)
    qty: int = 1


class RegisterRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "username": "jane",
                    "email": "jane.doe@example.com",
                    "password": "correct horse battery",
                }
            ]
        }
    }

    username: str = Field(..., max_length=64)
    email: str = Field(..., max_length=254)
    password: str = Field(..., max_length=256)


class LoginRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [{"username": "jane", "password": "correct horse battery"}]
        }
    }

    username: str = Field(..., max_length=64)
    password: str = Field(..., max_length=256)


# --- Response Schemas ---


class StatusResponse(BaseModel):
    status: str = "ok"


class OrderIdResponse(BaseModel):
    order_id: int
