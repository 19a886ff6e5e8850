from tiny_ioc import bean

from sample_app.entities import Address, Customer, Message


class AppConfig:
    @bean
    def customer(self) -> Customer:
        return Customer("GangTan", "gangtann@126.com")

    @bean
    def address(self) -> Address:
        return Address("China", "100000")

    def message(self) -> Message:
        return Message("Hello World!")


class BrokenConfig:
    def __init__(self, required):
        self.required = required
