# filmreview/models.py
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()


class User(db.Model):
    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}
    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.Text, unique=True)
    password_hash = db.Column("password", db.Text)


class Film(db.Model):
    __tablename__ = "films"
    __table_args__ = {"sqlite_autoincrement": True}
    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.Text)
    director = db.Column(db.Text)
    year = db.Column(db.Integer)
    description = db.Column(db.Text)


class Review(db.Model):
    __tablename__ = "reviews"
    __table_args__ = {"sqlite_autoincrement": True}
    id = db.Column(db.Integer, primary_key=True)
    film_id = db.Column(db.Integer, db.ForeignKey("films.id"))
    review = db.Column(db.Text)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"))
