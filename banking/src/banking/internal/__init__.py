"""
터미널에서 실행하는 내부 CLI 유틸 패키지.
Internal command-line utilities.
"""
