"""seed categories and products

Revision ID: 002
Revises: 001
Create Date: 2026-10-19 12:30:00.000000

"""
from datetime import datetime, timezone
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '002'
down_revision: Union[str, None] = '001'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

categories = sa.table(
    'categories',
    sa.column('id', sa.Integer),
    sa.column('name', sa.String),
    sa.column('image_url', sa.String),
)

products = sa.table(
    'products',
    sa.column('name', sa.String),
    sa.column('description', sa.String),
    sa.column('price', sa.Numeric),
    sa.column('image_url', sa.String),
    sa.column('stock', sa.Float),
    sa.column('registered_at', sa.DateTime),
    sa.column('category_id', sa.Integer),
)


def upgrade() -> None:
    op.bulk_insert(categories, [
        {'id': 1, 'name': 'Bebidas', 'image_url': 'bebidas.jpg'},
        {'id': 2, 'name': 'Lanches', 'image_url': 'lanches.jpg'},
        {'id': 3, 'name': 'Sobremesas', 'image_url': 'sobremesas.jpg'},
    ])

    now = datetime.now(timezone.utc).replace(tzinfo=None)
    op.bulk_insert(products, [
        {'name': 'Coca-Cola Zero', 'description': 'Refrigerante de Cola 350 ml', 'price': 5.45,
         'image_url': 'cocacolazero.jpg', 'stock': 50, 'registered_at': now, 'category_id': 1},
        {'name': 'Hamburguer 300',
         'description': 'Hamburguer com 2 hamburgueres de 150g, Queijo Mussarela, Tomate, Alface e Maionese',
         'price': 32.90, 'image_url': 'hamburguer300.jpg', 'stock': 25, 'registered_at': now, 'category_id': 2},
        {'name': 'Sorvete de Amarula', 'description': 'Bola de Sorvete de Amarula', 'price': 3.50,
         'image_url': 'sovetebola.jpg', 'stock': 45, 'registered_at': now, 'category_id': 3},
    ])


def downgrade() -> None:
    op.execute(products.delete())
    op.execute(categories.delete().where(categories.c.id.in_([1, 2, 3])))
