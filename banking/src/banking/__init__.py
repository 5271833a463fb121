"""
project_core 의 Result 타입 위에서 동작하는 모의(mock) 뱅킹 세션 패키지.
Simulated banking session built on top of the project_core Result type.

설정(config), 도메인 에러(errors), 모델(models), 원격 서비스와 유즈케이스
(services), 그리고 CLI 유틸(internal)을 포함한다.
It contains configuration, domain errors, models, the remote services port
with its mock implementation and use cases, and CLI utilities.
"""
