from flask import Blueprint, jsonify
from gamehall.services.games import GAMES

main = Blueprint('main', __name__)

@main.route('/')
def index():
    return jsonify({'message': 'Welcome to the gamehall server!', 'games': sorted(GAMES)})
