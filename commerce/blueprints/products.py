"""Products blueprint - public catalog browsing."""
from flask import Blueprint, jsonify
from commerce.database import get_session
from commerce.services import product_service
from commerce.utils.paging import get_paging

products_bp = Blueprint('products', __name__, url_prefix='/v1/products')


@products_bp.route('', methods=['GET'])
def list_products():
    limit, offset = get_paging('PRODUCT_LIST_DEFAULT_LIMIT')
    products = product_service.find_products(get_session(), limit, offset)
    return jsonify({'status': 'success', 'data': products})


@products_bp.route('/<int:product_id>', methods=['GET'])
def product_detail(product_id):
    return jsonify({'status': 'success', 'data': product_service.find_product(get_session(), product_id)})
