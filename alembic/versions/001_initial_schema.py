"""Initial schema

Revision ID: 001
Revises: 
Create Date: 2026-10-19 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision = '001'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # Campaigns table
    op.create_table(
        'campaigns',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('owner_id', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('customer_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_campaigns_owner_id', 'campaigns', ['owner_id'])

    # Customers table
    op.create_table(
        'customers',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('campaign_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('owner_id', sa.String(), nullable=False),
        sa.Column('phone', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=True),
        sa.Column('is_verified', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('otp', sa.String(), nullable=False),
        sa.Column('otp_expires_at', sa.DateTime(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('verified_at', sa.DateTime(), nullable=True),
    )
    op.create_foreign_key('fk_customers_campaign_id', 'customers', 'campaigns', ['campaign_id'], ['id'])
    op.create_index('ix_customers_campaign_id', 'customers', ['campaign_id'])
    op.create_index('ix_customers_owner_id', 'customers', ['owner_id'])
    op.create_unique_constraint('uq_customers_phone_campaign', 'customers', ['phone', 'campaign_id'])


def downgrade() -> None:
    op.drop_constraint('uq_customers_phone_campaign', 'customers', type_='unique')
    op.drop_index('ix_customers_owner_id', table_name='customers')
    op.drop_index('ix_customers_campaign_id', table_name='customers')
    op.drop_constraint('fk_customers_campaign_id', 'customers', type_='foreignkey')
    op.drop_table('customers')
    op.drop_index('ix_campaigns_owner_id', table_name='campaigns')
    op.drop_table('campaigns')
