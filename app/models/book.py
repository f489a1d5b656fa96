from datetime import datetime
from app.extensions import db


class BookStatus:
    ACTIVE = "active"
    DELETED = "deleted"  # terminal: sadece audit için okunur


class Book(db.Model):
    __tablename__ = "books"
    __table_args__ = (
        # ISBN sadece aktif kayıtlar arasında benzersiz
        db.Index(
            "uq_books_isbn_active",
            "isbn",
            unique=True,
            sqlite_where=db.text("status = 'active'"),
            postgresql_where=db.text("status = 'active'"),
        ),
    )

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False, index=True)
    author = db.Column(db.String(200), nullable=False, index=True)
    isbn = db.Column(db.String(13), nullable=False)

    total_copies = db.Column(db.Integer, nullable=False, default=1)
    available_copies = db.Column(db.Integer, nullable=False, default=1)

    version = db.Column(db.Integer, nullable=False, default=1)
    status = db.Column(db.String(20), nullable=False, default=BookStatus.ACTIVE, index=True)

    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)
    deleted_at = db.Column(db.DateTime, nullable=True)

    @property
    def is_deleted(self) -> bool:
        return self.status == BookStatus.DELETED

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "author": self.author,
            "isbn": self.isbn,
            "total_copies": self.total_copies,
            "available_copies": self.available_copies,
            "version": self.version,
            "status": self.status,
        }

    def __repr__(self):
        return f"<Book {self.id} {self.isbn} v{self.version}>"
