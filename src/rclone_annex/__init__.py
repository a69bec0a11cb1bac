#!/usr/bin/env python
# -*- coding: utf-8 -*-

from .application import Application

if __name__ == "__main__":
    Application.run()

def main():
    Application.run()
