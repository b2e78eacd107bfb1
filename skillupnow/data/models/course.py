from sqlalchemy import Column, Integer, String, Text, Numeric

from skillupnow.data.database import Base


class CourseModel(Base):
    __tablename__ = "courses"

    id = Column(Integer, primary_key=True)
    title = Column(String(200), nullable=False)
    description = Column(Text)
    price = Column(Numeric(10, 2), nullable=False)
