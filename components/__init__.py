"""Init file for components package"""
