from alembic import op
import sqlalchemy as sa

revision = '0001_driver'
down_revision = None
branch_labels = None
depends_on = None

def upgrade() -> None:
    op.create_table(
        'driver',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(length=120), nullable=False, server_default=''),
        sa.Column('cpf', sa.String(length=32), nullable=False, server_default=''),
        sa.Column('cnh_number', sa.String(length=32), nullable=False, server_default=''),
        sa.Column('cnh_category', sa.String(length=120), nullable=False, server_default=''),
        sa.Column('phone', sa.String(length=32), nullable=False, server_default=''),
        sa.Column('status', sa.String(length=16), nullable=False, server_default='Active'),
        sa.Column('photo_filename', sa.String(length=255), nullable=True),
        sa.Column('photo_content_type', sa.String(length=100), nullable=True),
        sa.Column('cnh_pdf_filename', sa.String(length=255), nullable=True),
    )

def downgrade() -> None:
    op.drop_table('driver')
