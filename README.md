# ipcdemos

Three small examples of processes and components that talk to each other:

- **Publish/subscribe** inside one process. `Broker` keeps a list of callbacks
  for each topic. A `Subscriber` registers with it, and a `Publisher` sends
  messages through it.
- **FIFO echo**. A server reads lines from one named pipe and answers each of
  them on a second pipe. The client reads what you type, sends it to the
  server and prints the reply.
- **Pipe relay**. Two clients, `A` and `B`, exchange fixed-size `Message`
  records through a server that passes each record from one client's pipe to
  the other client's pipe.

The named-pipe demos need a POSIX system because they use `os.mkfifo`.

## Installation

```
pip install .
```

To run the tests, install the `test` extra (`pip install .[test]`), which
adds pytest.

## Publish/subscribe

```python
from ipcdemos.broker import Broker

broker = Broker()
broker.subscribe("MessageA", lambda msg: print("got", msg))
broker.publish("MessageA", "hello")   # prints: got hello
broker.publish("Other", "ignored")    # no subscribers for this topic, so nothing happens
```

`Broker.publish` calls the callbacks for a topic in the order they were
subscribed. `ipcdemos.pubsub` provides the dataclasses `Publisher` and
`Subscriber`. Each has a `name`, and each prints a line whenever it publishes
or receives a message. To run the demo, which uses one subscriber, one
publisher and one message:

```
pubsub-demo
```

## FIFO echo server and client

Start the server in one terminal and the client in another:

```
fifo-server
fifo-client
```

The server creates the pipes `/tmp/fifo_c2s` and `/tmp/fifo_s2c` if they do
not already exist. It answers each line until the client closes its end.
Each line you type comes back as `服务端回复: 收到 response [<line>]`. The
client stops when you type `exit` or when input ends.

Both commands take these options:

- `--c2s PATH` sets the client-to-server pipe.
- `--s2c PATH` sets the server-to-client pipe.

`fifo-client` also takes `--delay SECONDS`, which sets how long it waits
before it opens the pipes. The default is 1.

You can call the functions behind these commands yourself. They are in
`ipcdemos.fifo`:

- `create_fifos(paths)`
- `format_reply(message)`
- `serve(incoming, outgoing, out)`, which returns the number of lines it answered
- `run_client(lines, to_server, from_server, out)`, which returns the number of lines it sent

## Pipe relay

Start the server first, then one client for each side:

```
relay-server
relay-client A
relay-client B
```

A line typed into client `A` is printed by client `B`, and a line typed into
`B` is printed by `A`. The server uses the pipes `/tmp/pipe_A2S`,
`/tmp/pipe_S2A`, `/tmp/pipe_B2S` and `/tmp/pipe_S2B`. It relays until both
clients have closed their sending pipes, and then it removes the pipes.
`relay-client` prints a usage message and exits with status 1 unless it is
given exactly one argument that starts with `A` or `B`.

Each record is a `Message` from `ipcdemos.message`. On the wire a record is
one sender byte followed by 256 bytes of NUL-padded UTF-8 text, so the text
can be at most 255 bytes. Longer text is cut short at a character boundary.
The sender must be a single character. `Message.to_bytes()` and
`Message.from_bytes()` convert a message to and from this form.
`from_bytes` raises `ValueError` if it is not given exactly `MESSAGE_SIZE`
bytes.

The parts of the relay are in `ipcdemos.relay`:

- `pipe_paths(client)` returns the send path and the receive path for `"A"` or `"B"`, and raises `ValueError` for anything else.
- `relay(a_in, b_in, a_out, b_out, out)`
- `receive_loop(stream, client, out)`
- `send_lines(lines, client, stream)`

`relay`, `receive_loop` and `send_lines` each return the number of messages
they handled.

## Limitations

The relay connects exactly two clients, `A` and `B`. The pipe paths used by
the relay commands are fixed and cannot be changed from the command line.
Messages pass only between processes on the same machine. Nothing is stored,
and nothing is sent over a network.