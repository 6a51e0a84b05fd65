#!/usr/bin/env python3
"""
Tests for the Flask demo application

Run: python -m pytest sqlindent/tests/test_demo_app.py -v
"""

import os
import sys
import unittest

# Add repository root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from demo_app.app import app


class TestFormatApi(unittest.TestCase):
    """Test the JSON endpoint"""

    def setUp(self):
        app.config['TESTING'] = True
        self.client = app.test_client()

    def test_format(self):
        """Test a statement is formatted"""
        response = self.client.post('/api/format', json={'sql': 'select a from t'})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json(), {'formatted': "SELECT\n\ta\n\tFROM\n\t\tt"})

    def test_indent(self):
        """Test the indent option"""
        response = self.client.post('/api/format', json={'sql': 'select a', 'indent': 4})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json()['formatted'], "SELECT\n    a")

    def test_invalid_indent(self):
        """Test a bad indent is rejected"""
        for indent in (-1, 'two', True):
            response = self.client.post('/api/format', json={'sql': 'select a', 'indent': indent})
            self.assertEqual(response.status_code, 400)

    def test_negative_indent_matches_shell(self):
        """Test the API rejects a negative indent with the shell's message"""
        response = self.client.post('/api/format', json={'sql': 'select a', 'indent': -2})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.get_json()['error'], "Indent width must not be negative")

    def test_missing_sql(self):
        """Test empty input is rejected"""
        for payload in ({}, {'sql': '   '}, {'sql': 42}):
            response = self.client.post('/api/format', json=payload)
            self.assertEqual(response.status_code, 400)
            self.assertIn('error', response.get_json())

    def test_unbalanced(self):
        """Test unbalanced parentheses are reported as a client error"""
        response = self.client.post('/api/format', json={'sql': ')'})
        self.assertEqual(response.status_code, 400)
        self.assertIn('Unbalanced closing parenthesis', response.get_json()['error'])

    def test_unbalanced_clamped(self):
        """Test clamp lets unbalanced input through"""
        response = self.client.post('/api/format', json={'sql': ')', 'clamp': True})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json()['formatted'], ')')


class TestFormatPage(unittest.TestCase):
    """Test the HTML form"""

    def setUp(self):
        app.config['TESTING'] = True
        self.client = app.test_client()

    def test_form(self):
        """Test the empty form renders"""
        response = self.client.get('/')
        self.assertEqual(response.status_code, 200)
        self.assertIn(b'<form', response.data)

    def test_submit(self):
        """Test submitting a statement shows the result"""
        response = self.client.post('/', data={'sql': 'select a from t'})
        self.assertEqual(response.status_code, 200)
        self.assertIn(b'Formatted SQL', response.data)
        self.assertIn(b'SELECT\n\ta\n\tFROM\n\t\tt', response.data)

    def test_submit_empty(self):
        """Test submitting nothing flashes a message"""
        response = self.client.post('/', data={'sql': ''})
        self.assertEqual(response.status_code, 200)
        self.assertIn(b'No input provided!!', response.data)

    def test_submit_unbalanced(self):
        """Test errors are flashed"""
        response = self.client.post('/', data={'sql': ')'})
        self.assertEqual(response.status_code, 200)
        self.assertIn(b'Unbalanced closing parenthesis', response.data)


if __name__ == '__main__':
    unittest.main()
