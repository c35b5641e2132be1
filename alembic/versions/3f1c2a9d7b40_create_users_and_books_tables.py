"""Create users and books tables

Revision ID: 3f1c2a9d7b40
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c2a9d7b40'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table('books',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=500), nullable=False, comment='Book title'),
        sa.Column('author', sa.String(length=255), nullable=False, comment='Author name'),
        sa.Column('published_date', sa.Date(), nullable=False, comment='Date of publication'),
        sa.Column('language', sa.String(length=100), nullable=False, comment='Language the book is written in'),
        sa.Column('genre', sa.String(length=100), nullable=False, comment='Genre label'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_books_title'), 'books', ['title'], unique=False)
    op.create_index(op.f('ix_books_author'), 'books', ['author'], unique=False)

    op.create_table('users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_name', sa.String(length=100), nullable=False, comment='Login name, unique across all users'),
        sa.Column('password_hash', sa.String(length=255), nullable=False, comment='Bcrypt hash of the password'),
        sa.Column('name', sa.String(length=255), nullable=True, comment='Display name'),
        sa.Column('email', sa.String(length=255), nullable=True, comment='Email address used for password resets'),
        sa.Column('mobile', sa.String(length=50), nullable=True, comment='Mobile phone number'),
        sa.Column('address', sa.String(length=500), nullable=True, comment='Postal address'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_users_user_name'), 'users', ['user_name'], unique=True)
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_index(op.f('ix_users_user_name'), table_name='users')
    op.drop_table('users')
    op.drop_index(op.f('ix_books_author'), table_name='books')
    op.drop_index(op.f('ix_books_title'), table_name='books')
    op.drop_table('books')
