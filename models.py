# models.py

import sqlalchemy as sa
from sqlalchemy.orm import declarative_base

Base = declarative_base()

class Category(Base):
    __tablename__ = "categories"

    id = sa.Column(sa.Integer, primary_key=True, index=True)
    key = sa.Column(sa.String, unique=True, index=True, nullable=False)
    name = sa.Column(sa.String)

    def __repr__(self):
        return f"<Category(id={self.id}, key='{self.key}')>"

class Post(Base):
    __tablename__ = "posts"

    id = sa.Column(sa.Integer, primary_key=True, index=True)
    # Referential integrity is left to the store
    category_id = sa.Column(sa.Integer, sa.ForeignKey("categories.id"), nullable=True, index=True)
    title = sa.Column(sa.String)
    content = sa.Column(sa.Text)

    def __repr__(self):
        return f"<Post(id={self.id}, category_id={self.category_id})>"
