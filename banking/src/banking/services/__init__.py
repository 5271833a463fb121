"""
뱅킹 원격 서비스와 유즈케이스 패키지.
Banking remote services and use cases.

모든 연산은 예외 대신 Result 를 반환하며, 실제 네트워크/저장소에는 의존하지 않는다.
Every operation returns a Result instead of raising, and nothing here touches
a real network or storage layer.
"""
