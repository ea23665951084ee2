# src/bookstore/models/review.py
from sqlalchemy import Column, Integer, String, Text, ForeignKey
from bookstore.db.session import Base

class ReviewModel(Base):
    __tablename__ = "reviews"

    id = Column(Integer, primary_key=True)
    book_id = Column(Integer, ForeignKey("books.id"), nullable=False, index=True)
    reviewer = Column(String(255), nullable=False)
    rating = Column(Integer, nullable=False)
    text = Column(Text, nullable=False)

    def __repr__(self):
        return f"<ReviewModel(id={self.id}, book_id={self.book_id}, reviewer='{self.reviewer}', rating={self.rating})>"
