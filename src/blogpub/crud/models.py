"""Database table definitions for the conversion ledger"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import Column, DateTime, String, Text, UniqueConstraint
from sqlmodel import Field, SQLModel


class ConvertedPost(SQLModel, table=True):
    """A post written to a page bundle, keyed by its source file and bundle name"""
    __tablename__ = "converted_posts"
    __table_args__ = (UniqueConstraint("source_path", "bundle", name="uq_post_source_bundle"),)
    id: UUID = Field(default_factory=uuid4, primary_key=True)
    source_path: str = Field(..., sa_column=Column(Text, nullable=False, index=True))
    bundle: str = Field(..., sa_column=Column(Text, nullable=False))
    title: str = Field(default="", sa_column=Column(Text, nullable=False))
    date: str = Field(default="", nullable=False)
    hash: str = Field(..., sa_column=Column(String(64), nullable=False))
    output_path: str = Field(..., sa_column=Column(Text, nullable=False))
    created_at: datetime = Field(default_factory=datetime.now, sa_column=Column(DateTime(timezone=False), nullable=False))
    updated_at: datetime = Field(default_factory=datetime.now, sa_column=Column(DateTime(timezone=False), nullable=False))
    converted_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime(timezone=False), nullable=True))
