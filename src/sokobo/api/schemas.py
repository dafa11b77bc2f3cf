"""Pydantic request/response schemas for the storefront API."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

# --- Products ---


class CreateProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Sokobo Classic Tee",
                    "category": "tshirts",
                    "description": "Premium cotton streetwear with signature graphics.",
                    "price": "350.00",
                    "stock": 50,
                    "sizes": ["S", "M", "L", "XL"],
                    "images": ["https://images.example.com/classic-tee.jpg"],
                    "featured": True,
                }
            ]
        }
    }

    name: str = Field(..., min_length=1, max_length=200)
    category: str = Field(..., max_length=50)
    description: str = Field(..., min_length=1)
    price: Decimal | str
    stock: int | None = Field(None, ge=0)
    sizes: list[str] | None = None
    images: list[str] | None = None
    featured: bool | None = None


class UpdateProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "price": "299.00",
                    "stock": 12,
                    "sizes": ["M", "L"],
                }
            ]
        }
    }

    name: str | None = Field(None, min_length=1, max_length=200)
    category: str | None = Field(None, max_length=50)
    description: str | None = None
    price: Decimal | str | None = None
    stock: int | None = Field(None, ge=0)
    sizes: list[str] | None = None
    images: list[str] | None = None
    featured: bool | None = None


class AddImageRequest(BaseModel):
    url: str = Field(..., min_length=1, max_length=1000)


class AddSizeRequest(BaseModel):
    size: str = Field(..., min_length=1, max_length=50)


class ProductResponse(BaseModel):
    id: str
    name: str
    category: str
    description: str
    price: str
    stock: int
    sizes: list[str]
    images: list[str]
    featured: bool
    created_at: datetime


# --- Orders ---


class OrderLineSchema(BaseModel):
    product_id: str
    quantity: int = Field(..., ge=1)
    size: str
    price: Decimal | str
    name: str
    image: str | None = None


class ShippingAddressSchema(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    street: str = Field(..., min_length=1, max_length=255)
    city: str = Field(..., min_length=1, max_length=100)
    postal_code: str = Field(..., min_length=1, max_length=20)
    phone: str = Field(..., min_length=1, max_length=30)


class CreateOrderRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "items": [
                        {
                            "product_id": "prod-001",
                            "quantity": 2,
                            "size": "M",
                            "price": "350.00",
                            "name": "Sokobo Classic Tee",
                            "image": "https://images.example.com/classic-tee.jpg",
                        }
                    ],
                    "total": "700.00",
                    "shipping_address": {
                        "name": "Thandi Mokoena",
                        "street": "12 Vilakazi Street",
                        "city": "Soweto",
                        "postal_code": "1804",
                        "phone": "0821234567",
                    },
                }
            ]
        }
    }

    items: list[OrderLineSchema] = Field(..., min_length=1)
    total: str
    shipping_address: ShippingAddressSchema


class UpdateOrderStatusRequest(BaseModel):
    status: str


class OrderLineResponse(BaseModel):
    product_id: str
    quantity: int
    size: str
    price: str
    name: str
    image: str | None = None


class OrderResponse(BaseModel):
    id: str
    user_id: str
    items: list[OrderLineResponse]
    total: str
    status: str
    shipping_address: ShippingAddressSchema
    created_at: datetime


# --- Portfolio ---


class CreatePortfolioItemRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    images: list[str] | None = None
    category: str = Field(..., max_length=50)


class UpdatePortfolioItemRequest(BaseModel):
    title: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = None
    images: list[str] | None = None
    category: str | None = Field(None, max_length=50)


class PortfolioItemResponse(BaseModel):
    id: str
    title: str
    description: str
    images: list[str]
    category: str
    created_at: datetime


# --- Users and sessions ---


class RegisterRequest(BaseModel):
    name: str = Field(..., min_length=2, max_length=100)
    email: str = Field(..., min_length=3, max_length=254, pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    password: str = Field(..., min_length=6, max_length=128)


class LoginRequest(BaseModel):
    email: str
    password: str


class UserResponse(BaseModel):
    id: str
    name: str
    email: str
    role: str
    created_at: datetime


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserResponse


class UpdateRoleRequest(BaseModel):
    role: str


# --- Site ---


class ContactRequest(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., min_length=3, max_length=254)
    service: str | None = Field(None, max_length=100)
    message: str = Field(..., min_length=1)


class MessageResponse(BaseModel):
    message: str


class AnalyticsResponse(BaseModel):
    total_sales: str
    total_products: int
    total_orders: int
    total_customers: int
