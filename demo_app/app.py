#!/usr/bin/env python3
"""
Demo Web Application - SQL Formatter

A small web front end for SQLIndent.

Features:
- Paste a statement into a form and see it re-indented
- JSON endpoint for editor integrations

Run:
    pip install flask
    python app.py

Then visit: http://localhost:5000
"""

import os
import sys
from flask import Flask, render_template_string, request, flash, jsonify

# Add parent directory to path to import sqlindent
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlindent import FormatError, format_sql
from sqlindent.core.shell import build_options

app = Flask(__name__)
app.secret_key = os.environ.get('SQLINDENT_SECRET_KEY', 'sqlindent-demo-secret-key-change-in-production')


PAGE = """
<!doctype html>
<title>SQLIndent</title>
<h1>SQLIndent</h1>
{% with messages = get_flashed_messages(with_categories=true) %}
  {% for category, message in messages %}
    <p class="{{ category }}">{{ message }}</p>
  {% endfor %}
{% endwith %}
<form method="post">
  <textarea name="sql" rows="12" cols="80">{{ sql }}</textarea><br>
  <label><input type="checkbox" name="clamp" {% if clamp %}checked{% endif %}>
    Ignore unbalanced parentheses</label>
  <button type="submit">Format</button>
</form>
{% if formatted %}
<h2>Formatted SQL</h2>
<pre>{{ formatted }}</pre>
{% endif %}
"""


@app.route('/', methods=['GET', 'POST'])
def index():
    """Form for formatting a statement."""
    sql = ''
    formatted = None
    clamp = False

    if request.method == 'POST':
        sql = request.form.get('sql', '')
        clamp = bool(request.form.get('clamp'))

        if not sql.strip():
            flash('No input provided!!', 'error')
        else:
            try:
                formatted = format_sql(sql, build_options(clamp=clamp))
            except FormatError as e:
                flash(f'Error: {e}', 'error')

    return render_template_string(PAGE, sql=sql, formatted=formatted, clamp=clamp)


@app.route('/api/format', methods=['POST'])
def api_format():
    """API endpoint for formatting a statement."""
    payload = request.get_json(silent=True) or {}
    sql = payload.get('sql') or ''

    if not isinstance(sql, str) or not sql.strip():
        return jsonify({'error': 'No input provided'}), 400

    indent = payload.get('indent')
    if indent is not None and (isinstance(indent, bool) or not isinstance(indent, int)):
        return jsonify({'error': 'indent must be an integer'}), 400

    try:
        options = build_options(indent, bool(payload.get('clamp')))
    except ValueError as e:
        return jsonify({'error': str(e)}), 400

    try:
        formatted = format_sql(sql, options)
    except FormatError as e:
        return jsonify({'error': str(e)}), 400

    return jsonify({'formatted': formatted})


if __name__ == '__main__':
    print("\n" + "="*60)
    print("SQLIndent Demo - SQL Formatter")
    print("="*60)
    print("Starting server at http://localhost:5000")
    print("\nPress Ctrl+C to stop the server.\n")

    app.run(debug=True, host='127.0.0.1', port=5000)
