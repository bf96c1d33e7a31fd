from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import relationship

from ehds_explorer.core.database import Base


class Chapter(Base):
    """Модель главы"""

    __tablename__ = "chapters"

    id = Column(Integer, primary_key=True, index=True)
    chapter_number = Column(Integer, nullable=False, unique=True, index=True)
    title = Column(String(500), nullable=False)
    description = Column(Text)

    articles = relationship("Article", back_populates="chapter")

    def __repr__(self):
        return f"<Chapter(id={self.id}, chapter_number={self.chapter_number})>"


class Article(Base):
    """Модель статьи"""

    __tablename__ = "articles"

    id = Column(Integer, primary_key=True, index=True)
    article_number = Column(Integer, nullable=False, unique=True, index=True)
    title = Column(String(500), nullable=False)
    content = Column(Text, nullable=False)
    chapter_id = Column(
        Integer, ForeignKey("chapters.id", ondelete="SET NULL"), index=True
    )

    chapter = relationship("Chapter", back_populates="articles")

    def __repr__(self):
        return f"<Article(id={self.id}, article_number={self.article_number})>"


class Recital(Base):
    """Модель соображения"""

    __tablename__ = "recitals"

    id = Column(Integer, primary_key=True, index=True)
    recital_number = Column(Integer, nullable=False, unique=True, index=True)
    content = Column(Text, nullable=False)
    related_articles = Column(ARRAY(Integer))

    def __repr__(self):
        return f"<Recital(id={self.id}, recital_number={self.recital_number})>"


class Definition(Base):
    """Модель определения"""

    __tablename__ = "definitions"

    id = Column(Integer, primary_key=True, index=True)
    term = Column(String(500), nullable=False, index=True)
    definition = Column(Text, nullable=False)
    source_article = Column(Integer)

    def __repr__(self):
        return f"<Definition(id={self.id}, term={self.term})>"


class Annex(Base):
    """Модель приложения"""

    __tablename__ = "annexes"

    id = Column(String(20), primary_key=True)  # Римское число: I, II, ...
    title = Column(String(500), nullable=False)
    content = Column(Text, nullable=False)

    def __repr__(self):
        return f"<Annex(id={self.id})>"
