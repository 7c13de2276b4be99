from tonbi import *

greeter = (
    Command("greeter", "A simple greeting CLI application", shell=True)
    .arg("name", "Name of the person to greet", short="n", takes_value=True)
    .arg("enthusiastic", "Add excitement to the greeting", short="e")
    .subcommand(
        "farewell",
        "Say goodbye instead of hello",
        arguments=[Arg("name", "Name of the person to bid farewell", short="n", takes_value=True)],
    )
)


@greeter.handler
def greet(matches):
    if (name := matches.value_of("name")) is None:
        name = "world"
    if matches.is_present("enthusiastic"):
        return f"Hello, {name}!!!"
    return f"Hello, {name}."


@greeter.find_child("farewell").handler
def farewell(matches):
    if (name := matches.value_of("name")) is None:
        name = "friend"
    return f"Goodbye, {name}!"


if __name__ == '__main__':
    print(invoke(greeter))
