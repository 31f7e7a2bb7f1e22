#font.py
from PySide6.QtGui import QFont, QPalette, QColor

normal_font = QFont("Segoe UI, Helvetica, sans-serif", 12)

# words in the lists
list_word_font = QFont("Georgia, Times New Roman, serif", 13)
list_word_font.setBold(True)

translation_font = QFont("Segoe UI, Helvetica, sans-serif", 12)
translation_palette = QPalette()
translation_palette.setColor(QPalette.WindowText, QColor("gray"))

title_font = QFont("Georgia, Times New Roman, serif", 15)
title_font.setBold(True)
