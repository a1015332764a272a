#!/usr/bin/env python3
from flask_sqlalchemy import SQLAlchemy
from datetime import datetime, timezone

db = SQLAlchemy()


def _utcnow():
    return datetime.now(timezone.utc)


class CyberTip(db.Model):
    __tablename__ = "cyber_tips"

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=False)
    category = db.Column(db.String(50), nullable=False)
    severity = db.Column(db.String(20))
    created_at = db.Column(db.DateTime, default=_utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "category": self.category,
            "severity": self.severity,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


class KnowledgeArticle(db.Model):
    __tablename__ = "cyber_knowledge"

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False)
    content = db.Column(db.Text, nullable=False)
    category = db.Column(db.String(50), nullable=False)
    reading_time = db.Column(db.Integer)  # minutes
    created_at = db.Column(db.DateTime, default=_utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "category": self.category,
            "reading_time": self.reading_time,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


class CrimeCase(db.Model):
    __tablename__ = "cyber_crime_cases"

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=False)
    date = db.Column(db.String(40))
    impact = db.Column(db.Text)
    lessons = db.Column(db.Text)
    created_at = db.Column(db.DateTime, default=_utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "date": self.date,
            "impact": self.impact,
            "lessons": self.lessons,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
